"""
PaymentSegment model - the 240-character per-transaction block of a detail record.
"""

from pydantic import BaseModel, ConfigDict

SEGMENT_LENGTH = 240


class PaymentSegment(BaseModel):
    """
    One validated transaction (immutable once built).

    Values are stored already normalized: the institution number is
    zero-padded to 4, the branch number to 5, and the payment date holds a
    2-digit year. Build instances through PaymentSegmentBuilder so every
    field passes its contract.

    Attributes:
        transaction_code: 3-character CPA transaction code
        amount: Amount in cents
        payment_date: (2-digit year, ordinal day-of-year)
        financial_institution_number: 4-character institution number
        branch_number: 5-digit branch transit number
        account_number: Up to 12 digits
        client_short_name: Up to 15 characters
        customer_name: Up to 30 characters
        client_name: Up to 30 characters
        client_number: 10 digits
        customer_number: Up to 19 characters
        sundry_information: Up to 15 characters
    """

    model_config = ConfigDict(frozen=True)

    transaction_code: str = ""
    amount: int = 0
    payment_date: tuple[int, int] = (0, 0)
    financial_institution_number: str = ""
    branch_number: str = ""
    account_number: str = ""
    client_short_name: str = ""
    customer_name: str = ""
    client_name: str = ""
    client_number: str = ""
    customer_number: str = ""
    sundry_information: str = ""

    def to_record(self) -> str:
        """Encode the segment in its fixed 240-character layout."""
        year, day = self.payment_date
        return "".join([
            f"{self.transaction_code:<3}",
            f"{self.amount // 100:08d}{self.amount % 100:02d}",
            f"0{year:02d}{day:03d}",
            f"{self.financial_institution_number:0>4}{self.branch_number:0>5}",
            f"{self.account_number:<12}",
            "0" * 22,  # reserved
            "0" * 3,  # reserved
            f"{self.client_short_name:<15}",
            f"{self.customer_name:<30}",
            f"{self.client_name:<30}",
            f"{self.client_number:<10}",
            f"{self.customer_number:<19}",
            "0" * 9,  # reserved
            " " * 12,  # reserved
            f"{self.sundry_information:<15}",
            " " * 22,  # reserved
            " " * 2,  # reserved
            " " * 11,  # reserved
        ])
