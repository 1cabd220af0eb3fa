"""
PaymentRow model representing one data row of the input payment list (ephemeral).
"""

from collections.abc import Sequence
from typing import ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict


class SourceRow(NamedTuple):
    """One non-blank row of delimited input with its 1-based line number."""

    line_number: int
    values: list[str]


class RowFormatError(ValueError):
    """Raised when a data row cannot be deserialized into a PaymentRow."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        self.message = message
        super().__init__(f"Row {line_number}: {message}")


class PaymentRow(BaseModel):
    """
    A single data row, column for column.

    Attributes:
        customer_number: Customer reference (blank rows are skipped)
        customer_name: Payee/payor name
        bank: Financial institution number
        branch: Branch transit number
        account: Account number
        amount: Human-formatted dollar amount, e.g. "$1,234.56"
        suspend: "Y" (any case) suspends the payment
        reserved_1, reserved_2: Trailing columns reserved for future use
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    COLUMNS: ClassVar[tuple[str, ...]] = (
        "customer_number",
        "customer_name",
        "bank",
        "branch",
        "account",
        "amount",
        "suspend",
        "reserved_1",
        "reserved_2",
    )

    customer_number: str
    customer_name: str
    bank: str
    branch: str
    account: str
    amount: str
    suspend: str
    reserved_1: str = ""
    reserved_2: str = ""

    @property
    def is_suspended(self) -> bool:
        return self.suspend.upper() == "Y"

    @property
    def has_customer_number(self) -> bool:
        return self.customer_number != ""

    @classmethod
    def from_values(cls, values: Sequence[str], line_number: int = 0) -> "PaymentRow":
        """
        Deserialize a row of column values.

        Args:
            values: Column values in input order
            line_number: Source line number, used in error messages

        Raises:
            RowFormatError: If the row does not have exactly nine columns
        """
        if len(values) != len(cls.COLUMNS):
            raise RowFormatError(
                line_number,
                f"expected {len(cls.COLUMNS)} columns, found {len(values)}",
            )
        return cls(**dict(zip(cls.COLUMNS, values)))
