"""
Payment segment builder.

Each setter validates one field independently. A failed setter writes to the
builder's ErrorLog and leaves that field at its default; the other setters
still run.
"""

from typing import Any

from cpa005.core.error_log import ErrorLog
from cpa005.core.models import PaymentSegment
from cpa005.core.rules import FieldRules


class PaymentSegmentBuilder:
    """
    Assembles one PaymentSegment from raw field values.

    Usage:
        builder = PaymentSegmentBuilder()
        builder.set_transaction_code("200").set_amount(10000)
        segment = builder.build()
        if not builder.error_log.is_empty():
            ...
    """

    def __init__(self, rules: FieldRules | None = None):
        self._rules = rules or FieldRules()
        self._fields: dict[str, Any] = {}
        self.error_log = ErrorLog()

    def _set(self, field_name: str, value: Any, stored: Any = None) -> "PaymentSegmentBuilder":
        if self._rules.validate(field_name, value, self.error_log):
            self._fields[field_name] = value if stored is None else stored
        return self

    def set_transaction_code(self, code: str) -> "PaymentSegmentBuilder":
        return self._set("transaction_code", code)

    def set_amount(self, cents: int) -> "PaymentSegmentBuilder":
        return self._set("amount", cents)

    def set_payment_date(self, year: int, day: int) -> "PaymentSegmentBuilder":
        """Set the payment date from a calendar year and ordinal day; the year is stored mod 100."""
        if self._rules.validate("payment_day", day, self.error_log):
            self._fields["payment_date"] = (year % 100, day)
        return self

    def set_financial_institution_number(self, number: str) -> "PaymentSegmentBuilder":
        return self._set("financial_institution_number", number, number.rjust(4, "0"))

    def set_branch_number(self, number: str) -> "PaymentSegmentBuilder":
        return self._set("branch_number", number, number.rjust(5, "0"))

    def set_account_number(self, number: str) -> "PaymentSegmentBuilder":
        return self._set("account_number", number)

    def set_client_short_name(self, short_name: str) -> "PaymentSegmentBuilder":
        return self._set("client_short_name", short_name)

    def set_customer_name(self, name: str) -> "PaymentSegmentBuilder":
        return self._set("customer_name", name)

    def set_client_name(self, name: str) -> "PaymentSegmentBuilder":
        return self._set("client_name", name)

    def set_client_number(self, number: str) -> "PaymentSegmentBuilder":
        return self._set("client_number", number)

    def set_customer_number(self, number: str) -> "PaymentSegmentBuilder":
        return self._set("customer_number", number)

    def set_sundry_information(self, info: str) -> "PaymentSegmentBuilder":
        return self._set("sundry_information", info)

    def build(self) -> PaymentSegment:
        """Freeze the fields set so far into a PaymentSegment."""
        return PaymentSegment(**self._fields)
