"""
Payment model - a credit or debit detail record wrapping one or more segments.
"""

from pydantic import BaseModel, ConfigDict

from .payment_segment import PaymentSegment
from .types import RecordType

PAYMENT_PREFIX_LENGTH = 24


class RecordTypeError(ValueError):
    """Raised when a detail record carries a record type other than Credit or Debit."""

    def __init__(self, record_type: RecordType):
        self.record_type = record_type
        super().__init__(
            f"Payment record type must be Credit or Debit, got {record_type.name.title()}"
        )


class Payment(BaseModel):
    """
    A detail record (immutable once appended to a CPA005File).

    Attributes:
        record_type: CREDIT or DEBIT
        record_number: Sequence number in the file, assigned on append
        client_number: 10-digit client number
        file_creation_number: Per-record sequence field, equal to the record number
        segments: Transactions carried by the record, in insertion order
    """

    model_config = ConfigDict(frozen=True)

    record_type: RecordType
    record_number: int = 0
    client_number: str = ""
    file_creation_number: int = 0
    segments: tuple[PaymentSegment, ...] = ()

    @property
    def total_amount(self) -> int:
        return sum(segment.amount for segment in self.segments)

    def to_record(self) -> str:
        """
        Encode the record prefix followed by every segment.

        Raises:
            RecordTypeError: If the record type is not CREDIT or DEBIT
        """
        if not self.record_type.is_payment:
            raise RecordTypeError(self.record_type)

        prefix = (
            f"{self.record_type.code}"
            f"{self.record_number:09d}"
            f"{self.client_number:<10}"
            f"{self.file_creation_number:<4}"
        )
        return prefix + "".join(segment.to_record() for segment in self.segments)
