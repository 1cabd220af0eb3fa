"""
CPA005File - the file-level aggregator.

Assigns record numbers, keeps the debit/credit totals and counts, and renders
the header (A), detail (C/D) and trailer (Z) records.

Layout of the 1464-character header record:
    A | 000000001 | client number (10) | file creation number (4)
      | 0YYDDD creation date (6) | processing centre (5) | 20 spaces
      | currency (3) | 1406 spaces

Layout of the 1464-character trailer record:
    Z | record count (9) | client number (10) | file creation number (4)
      | debit total (14) | debit count (8) | credit total (14)
      | credit count (8) | 1396 zeros
"""

from cpa005.core.error_log import ErrorLog
from cpa005.core.models import (
    CurrencyType,
    Payment,
    ProcessingCentre,
    RecordType,
    RecordTypeError,
)
from cpa005.core.rules import FieldRules

RECORD_LENGTH = 1464
HEADER_RECORD_NUMBER = 1


class CPA005File:
    """
    Stateful accumulator for one conversion (never reused).

    Phases: accumulating (append allowed) until build() is called, then
    finalized. Contract violations such as a non-payment record type are
    written to ``error_log``; nothing here raises for bad input.
    """

    def __init__(self, rules: FieldRules | None = None):
        self._rules = rules or FieldRules()
        self.error_log = ErrorLog()

        self.current_record_no = HEADER_RECORD_NUMBER
        self.client_number = ""
        self.file_creation_number = 0
        self.file_creation_date: tuple[int, int] = (0, 0)
        self.processing_centre = ProcessingCentre.VANCOUVER
        self.currency = CurrencyType.CAD

        self.total_debit_amount = 0
        self.total_debit_count = 0
        self.total_credit_amount = 0
        self.total_credit_count = 0

        self.payments: list[Payment] = []
        self._finalized = False

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    # =======================
    # SETTERS
    # =======================

    def set_client_number(self, client_number: str) -> "CPA005File":
        if self._rules.validate("client_number", client_number, self.error_log):
            self.client_number = client_number
        return self

    def set_file_creation_number(self, number: int) -> "CPA005File":
        if self._rules.validate("file_creation_number", number, self.error_log):
            self.file_creation_number = number
        return self

    def set_file_creation_date(self, year: int, day: int) -> "CPA005File":
        """Set the creation date as (calendar year, ordinal day)."""
        year_ok = self._rules.validate("file_creation_year", year, self.error_log)
        day_ok = self._rules.validate("file_creation_day", day, self.error_log)
        if year_ok and day_ok:
            self.file_creation_date = (year, day)
        return self

    def set_processing_centre(self, centre: ProcessingCentre) -> "CPA005File":
        self.processing_centre = centre
        return self

    def set_currency(self, currency: CurrencyType) -> "CPA005File":
        self.currency = currency
        return self

    # =======================
    # ACCUMULATION
    # =======================

    def _allocate_record_no(self) -> int:
        self.current_record_no += 1
        return self.current_record_no

    def append(self, payment: Payment) -> Payment | None:
        """
        Number a payment, add it to the totals and store it.

        The payment receives the next record number, and the same value as its
        file creation number.

        Returns:
            The stored (numbered) payment, or None if it was rejected
        """
        if self._finalized:
            self.error_log.write("Cannot add a payment to a file that has already been built")
            return None

        if not payment.record_type.is_payment:
            self.error_log.write(str(RecordTypeError(payment.record_type)))
            return None

        record_no = self._allocate_record_no()
        update: dict[str, int] = {"record_number": record_no}
        if self._rules.validate("file_creation_number", record_no, self.error_log):
            update["file_creation_number"] = record_no
        payment = payment.model_copy(update=update)

        amount = payment.total_amount
        if payment.record_type is RecordType.CREDIT:
            self.total_credit_count += 1
            self.total_credit_amount += amount
        else:
            self.total_debit_count += 1
            self.total_debit_amount += amount

        self.payments.append(payment)
        return payment

    # =======================
    # RENDERING
    # =======================

    @staticmethod
    def _format_total(cents: int) -> str:
        return f"{cents // 100:012d}{cents % 100:02d}"

    def build_header_record(self) -> str:
        year, day = self.file_creation_date
        return "".join([
            RecordType.HEADER.code,
            f"{HEADER_RECORD_NUMBER:09d}",
            f"{self.client_number:<10}",
            f"{self.file_creation_number:<4}",
            f"0{year % 100:02d}{day:03d}",
            self.processing_centre.code,
            " " * 20,
            self.currency.value,
            " " * 1406,
        ])

    def build_trailer_record(self) -> str:
        return "".join([
            RecordType.TRAILER.code,
            f"{self.current_record_no + 1:09d}",
            f"{self.client_number:<10}",
            f"{self.file_creation_number:<4}",
            self._format_total(self.total_debit_amount),
            f"{self.total_debit_count:08d}",
            self._format_total(self.total_credit_amount),
            f"{self.total_credit_count:08d}",
            "0" * 1396,
        ])

    def build(self) -> str:
        """
        Render header, detail and trailer records joined by newlines.

        Calling build() finalizes the file; later appends are rejected.
        """
        self._finalized = True

        lines = [self.build_header_record()]
        for payment in self.payments:
            try:
                lines.append(payment.to_record())
            except RecordTypeError as e:
                self.error_log.write(str(e))
        lines.append(self.build_trailer_record())
        return "\n".join(lines)
