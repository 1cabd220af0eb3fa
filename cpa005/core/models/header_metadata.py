"""
HeaderMetadata model - the six key/value lines at the top of an input file.
"""

from pydantic import BaseModel, ConfigDict

from .types import CurrencyType, ProcessingCentre


class HeaderMetadata(BaseModel):
    """
    Client-level values shared by every payment in a file (read-only).

    Attributes:
        client_name: Client long name, copied into every segment
        client_number: 10-digit client number, kept as text for leading zeros
        processing_centre: Receiving data centre
        currency: Destination currency
        payment_date: (calendar year, ordinal day-of-year); (0, 0) when the
            date could not be parsed
        transaction_code: 3-character CPA transaction code
    """

    model_config = ConfigDict(frozen=True)

    client_name: str = ""
    client_number: str = ""
    processing_centre: ProcessingCentre = ProcessingCentre.VANCOUVER
    currency: CurrencyType = CurrencyType.CAD
    payment_date: tuple[int, int] = (0, 0)
    transaction_code: str = ""

    @property
    def client_short_name(self) -> str:
        """Client name truncated to the 15-character short-name field."""
        return self.client_name[:15]
