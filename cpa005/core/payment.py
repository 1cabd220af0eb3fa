"""
Payment record builder.

Wraps one or more segments under a Credit or Debit record type. Record
numbers are not set here; CPA005File assigns them on append.
"""

from cpa005.core.error_log import ErrorLog
from cpa005.core.models import Payment, PaymentSegment, RecordType
from cpa005.core.rules import FieldRules


class PaymentBuilder:
    """
    Assembles a Payment and collects its validation errors.

    A record type other than CREDIT or DEBIT is logged as a contract error and
    build() then returns None instead of a payment.
    """

    def __init__(self, record_type: RecordType = RecordType.CREDIT, rules: FieldRules | None = None):
        self._rules = rules or FieldRules()
        self.error_log = ErrorLog()
        self._record_type: RecordType | None = None
        self._client_number = ""
        self._file_creation_number = 0
        self._segments: list[PaymentSegment] = []
        self.set_record_type(record_type)

    def set_record_type(self, record_type: RecordType) -> "PaymentBuilder":
        if not isinstance(record_type, RecordType) or not record_type.is_payment:
            name = record_type.name.title() if isinstance(record_type, RecordType) else repr(record_type)
            self.error_log.write(f"Payment record type must be Credit or Debit, got {name}")
            self._record_type = None
            return self

        self._record_type = record_type
        return self

    def set_client_number(self, client_number: str) -> "PaymentBuilder":
        if self._rules.validate("client_number", client_number, self.error_log):
            self._client_number = client_number
        return self

    def set_file_creation_number(self, number: int) -> "PaymentBuilder":
        if self._rules.validate("file_creation_number", number, self.error_log):
            self._file_creation_number = number
        return self

    def add_segment(self, segment: PaymentSegment) -> "PaymentBuilder":
        self._segments.append(segment)
        return self

    def build(self) -> Payment | None:
        """
        Freeze the record.

        Returns:
            The Payment, or None when the record type was rejected
        """
        if self._record_type is None:
            return None

        return Payment(
            record_type=self._record_type,
            client_number=self._client_number,
            file_creation_number=self._file_creation_number,
            segments=tuple(self._segments),
        )
