"""
Closed code sets used by the CPA-005 record layout.
"""

from enum import Enum


class ProcessingCentre(str, Enum):
    """
    Data centre that receives the file, keyed by its 5-digit code.

    The enum value is the code written into the header record; the member
    name is the centre's city.
    """

    HALIFAX = "00330"
    MONTREAL = "00310"
    TORONTO = "00320"
    REGINA = "00278"
    WINNIPEG = "00370"
    CALGARY = "00390"
    VANCOUVER = "00300"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.title()

    @classmethod
    def from_code(cls, code: str) -> "ProcessingCentre":
        """
        Look up a centre by code, zero-padding short codes to 5 digits.

        Raises:
            ValueError: If the code is not one of the known centres
        """
        return cls(code.strip().rjust(5, "0"))

    @classmethod
    def from_name(cls, name: str) -> "ProcessingCentre":
        """
        Look up a centre by city name (case-insensitive).

        Raises:
            ValueError: If no centre has that name
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown processing centre name: {name!r}") from None


class CurrencyType(str, Enum):
    """Destination currency of the file."""

    CAD = "CAD"
    USD = "USD"


class RecordType(str, Enum):
    """
    Logical record kind; the value is the record's first character.

    Only CREDIT and DEBIT may appear on a payment detail record. HEADER and
    TRAILER belong to the file's own records.
    """

    HEADER = "A"
    CREDIT = "C"
    DEBIT = "D"
    TRAILER = "Z"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_payment(self) -> bool:
        return self in PAYMENT_RECORD_TYPES


PAYMENT_RECORD_TYPES = frozenset({RecordType.CREDIT, RecordType.DEBIT})
