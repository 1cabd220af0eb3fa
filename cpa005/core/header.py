"""
Header metadata parsing.

The first six rows of an input file are ``key,value`` pairs in a fixed order.
Every problem is written to an ErrorLog and a safe default is substituted, so
all header problems surface in one pass.
"""

from collections.abc import Iterator
from datetime import datetime
from typing import Any

from cpa005.core.error_log import ErrorLog
from cpa005.core.models import CurrencyType, HeaderMetadata, ProcessingCentre, SourceRow
from cpa005.core.rules import FieldRules
from cpa005.observability.logger import get_logger

logger = get_logger(__name__)

PAYMENT_DATE_FORMAT = "%Y/%m/%d"

# (row key, HeaderMetadata attribute), in the order the rows must appear
HEADER_FIELDS = (
    ("Client Name", "client_name"),
    ("Client Number", "client_number"),
    ("Processing Centre", "processing_centre"),
    ("Currency Code", "currency"),
    ("Payment Date", "payment_date"),
    ("Transaction Code", "transaction_code"),
)

# Text fields checked against the same contracts the segment builder applies
VALIDATED_FIELDS = ("client_name", "client_number", "transaction_code")


class HeaderMetadataParser:
    """
    Reads the six metadata rows into a HeaderMetadata.

    Each row is consumed whether or not its key matches, so one bad row
    never shifts the keys that follow it. Client name, client number and
    transaction code are checked against their field contracts here, so a
    bad header is reported even when no data row becomes a payment.
    """

    def __init__(self, rules: FieldRules | None = None):
        self._rules = rules or FieldRules()

    def parse(self, rows: Iterator[SourceRow]) -> tuple[HeaderMetadata, ErrorLog]:
        """
        Consume six rows from ``rows`` and build the metadata.

        Args:
            rows: Iterator over the input rows; left positioned after the header

        Returns:
            Tuple of (metadata, error_log). Fields that could not be read or
            converted keep their defaults: Vancouver, CAD, payment date
            (0, 0), empty text. Text fields that break their contract are
            logged and kept as read.
        """
        error_log = ErrorLog()
        values: dict[str, Any] = {}

        for key, attribute in HEADER_FIELDS:
            raw = self._read_value(rows, key, error_log)
            if raw is None:
                continue

            if attribute in VALIDATED_FIELDS:
                self._rules.validate(attribute, raw, error_log)

            converter = getattr(self, f"_convert_{attribute}", None)
            value = converter(raw, error_log) if converter else raw
            if value is not None:
                values[attribute] = value

        metadata = HeaderMetadata(**values)
        logger.debug(
            "Parsed metadata header",
            extra={"errors": len(error_log), "processing_centre": metadata.processing_centre.code},
        )
        return metadata, error_log

    def _read_value(self, rows: Iterator[SourceRow], key: str, error_log: ErrorLog) -> str | None:
        row = next(rows, None)
        if row is None:
            error_log.write(f"Could not read metadata row: {key}")
            return None

        if not row.values:
            error_log.write(f"No metadata key found on line {row.line_number}, expected {key}")
            return None

        found = row.values[0].strip()
        if found != key:
            error_log.write(
                f"Expected metadata key {key}, got {found} instead (line {row.line_number})"
            )
            return None

        if len(row.values) < 2:
            error_log.write(f"Expected value for metadata key {key} (line {row.line_number})")
            return None

        return row.values[1].strip()

    def _convert_processing_centre(self, raw: str, error_log: ErrorLog) -> ProcessingCentre:
        try:
            return ProcessingCentre.from_code(raw)
        except ValueError:
            error_log.write(f"Invalid Processing Centre: {raw.rjust(5, '0')} specified in metadata header")
            return ProcessingCentre.VANCOUVER

    def _convert_currency(self, raw: str, error_log: ErrorLog) -> CurrencyType:
        try:
            return CurrencyType(raw.upper())
        except ValueError:
            error_log.write(f"Invalid Currency Code: {raw.upper()} specified in metadata header")
            return CurrencyType.CAD

    def _convert_payment_date(self, raw: str, error_log: ErrorLog) -> tuple[int, int]:
        try:
            parsed = datetime.strptime(raw, PAYMENT_DATE_FORMAT).date()
        except ValueError as e:
            error_log.write(
                f"Could not parse payment date. Date should be in the form of YYYY/MM/DD: {e}"
            )
            return (0, 0)
        return (parsed.year, parsed.timetuple().tm_yday)
