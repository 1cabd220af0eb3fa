"""
Conversion pipeline orchestration.

Coordinates the flow: read rows → parse metadata → build segments and
payments → aggregate → render, collecting every error along the way.
"""

from datetime import date

from cpa005.batch.readers import CSVReadError, CSVReader
from cpa005.core.amount import AmountParseError, parse_dollar_amount_to_cents
from cpa005.core.config import ConverterConfig
from cpa005.core.cpa005_file import CPA005File
from cpa005.core.error_log import ErrorLog
from cpa005.core.header import HeaderMetadataParser
from cpa005.core.models import (
    ConversionResult,
    HeaderMetadata,
    Payment,
    PaymentRow,
    RecordType,
    RowFormatError,
    SourceRow,
)
from cpa005.core.payment import PaymentBuilder
from cpa005.core.rules import FieldRules
from cpa005.core.segment import PaymentSegmentBuilder
from cpa005.observability.logger import get_logger, log_operation
from cpa005.observability.metrics import (
    conversion_duration_seconds,
    record_conversion,
    track_duration,
)

logger = get_logger(__name__)


class ConversionPipeline:
    """
    Converts a payment list into a CPA-005 file.

    Flow:
    1. Tokenize the input into rows
    2. Parse the six metadata rows
    3. Initialize the CPA005File from the metadata
    4. Skip the column-title row, then build one payment per data row
    5. Render the file, or return every error when any was logged

    The pipeline holds no per-conversion state, so one instance may serve
    many conversions.
    """

    def __init__(self, config: ConverterConfig | None = None, rules: FieldRules | None = None):
        """
        Initialize conversion pipeline.

        Args:
            config: Converter settings (defaults apply when omitted)
            rules: Field contracts shared by all builders
        """
        self.config = config or ConverterConfig()
        self.rules = rules or FieldRules()
        self.csv_reader = CSVReader()
        self.header_parser = HeaderMetadataParser(self.rules)

    def convert(
        self,
        raw_text: str,
        record_type: RecordType,
        creation_date: date | None = None,
    ) -> ConversionResult:
        """
        Convert delimited payment-list text.

        Args:
            raw_text: Entire input file as text
            record_type: CREDIT for deposit (PDS) files, DEBIT for debit (PAD) files
            creation_date: File creation date; defaults to today

        Returns:
            ConversionResult holding either the file text or every error found
        """
        if not isinstance(record_type, RecordType) or not record_type.is_payment:
            name = record_type.name.title() if isinstance(record_type, RecordType) else repr(record_type)
            message = f"Conversion record type must be Credit or Debit, got {name}"
            logger.error(message)
            return ConversionResult(ok=False, errors=[message])

        label = record_type.name.lower()
        with track_duration(conversion_duration_seconds, record_type=label), \
                log_operation("CPA-005 conversion", logger=logger, record_type=label):
            return self._convert(raw_text, record_type, creation_date or date.today())

    def _convert(self, raw_text: str, record_type: RecordType, creation_date: date) -> ConversionResult:
        errors = ErrorLog()
        label = record_type.name.lower()

        try:
            rows = self.csv_reader.read_text(raw_text)
        except CSVReadError as e:
            errors.write(str(e))
            record_conversion(label, False, 0, 0, 0)
            return ConversionResult(ok=False, errors=errors.messages)

        row_iter = iter(rows)

        # Step 1: metadata
        metadata, header_errors = self.header_parser.parse(row_iter)
        errors.merge(header_errors)

        # Step 2: file
        cpa_file = self._create_file(metadata, creation_date)

        # Step 3: column-title row
        next(row_iter, None)

        # Step 4: data rows
        skipped = 0
        rejected = 0
        for source_row in row_iter:
            try:
                row = PaymentRow.from_values(source_row.values, source_row.line_number)
            except RowFormatError as e:
                errors.write(str(e))
                rejected += 1
                continue

            if not row.has_customer_number or row.is_suspended:
                logger.debug("Skipping row", extra={"line": source_row.line_number})
                skipped += 1
                continue

            payment = self._build_payment(source_row, row, metadata, record_type, errors)
            if payment is None:
                rejected += 1
                continue
            cpa_file.append(payment)

        # Step 5: render
        output = cpa_file.build()
        errors.merge(cpa_file.error_log)

        ok = errors.is_empty()
        record_conversion(label, ok, len(cpa_file.payments), skipped, rejected)

        if not ok:
            logger.warning(
                "Conversion failed",
                extra={"record_type": label, "error_count": len(errors)},
            )
            return ConversionResult(
                ok=False,
                errors=errors.messages,
                payment_count=len(cpa_file.payments),
                skipped_rows=skipped,
            )

        logger.info(
            "Conversion succeeded",
            extra={"record_type": label, "payments": len(cpa_file.payments), "skipped_rows": skipped},
        )
        return ConversionResult(
            ok=True,
            output=output,
            payment_count=len(cpa_file.payments),
            skipped_rows=skipped,
        )

    def _create_file(self, metadata: HeaderMetadata, creation_date: date) -> CPA005File:
        cpa_file = CPA005File(self.rules)
        (
            cpa_file
            .set_client_number(metadata.client_number)
            .set_currency(metadata.currency)
            .set_processing_centre(metadata.processing_centre)
            .set_file_creation_number(self.config.file_creation_number)
            .set_file_creation_date(creation_date.year, creation_date.timetuple().tm_yday)
        )
        return cpa_file

    def _build_payment(
        self,
        source_row: SourceRow,
        row: PaymentRow,
        metadata: HeaderMetadata,
        record_type: RecordType,
        errors: ErrorLog,
    ) -> Payment | None:
        """
        Build the payment for one data row.

        Returns None when the amount cannot be parsed or the payment was
        rejected; the reason is already in ``errors``.
        """
        try:
            cents = parse_dollar_amount_to_cents(row.amount)
        except AmountParseError as e:
            errors.write(f"Row {source_row.line_number}: {e}")
            return None

        segment_builder = PaymentSegmentBuilder(self.rules)
        year, day = metadata.payment_date
        (
            segment_builder
            .set_transaction_code(metadata.transaction_code)
            .set_client_name(metadata.client_name)
            .set_customer_number(row.customer_number)
            .set_customer_name(row.customer_name)
            .set_financial_institution_number(row.bank)
            .set_branch_number(row.branch)
            .set_account_number(row.account)
            .set_payment_date(year, day)
            .set_client_number(metadata.client_number)
            .set_client_short_name(metadata.client_short_name)
            .set_amount(cents)
        )

        payment_builder = PaymentBuilder(record_type, self.rules)
        payment_builder.set_client_number(metadata.client_number)
        payment_builder.add_segment(segment_builder.build())

        row_errors = ErrorLog()
        row_errors.merge(segment_builder.error_log)
        row_errors.merge(payment_builder.error_log)
        for message in row_errors:
            errors.write(f"Row {source_row.line_number}: {message}")

        return payment_builder.build()


def convert(
    raw_text: str,
    record_type: RecordType,
    creation_date: date | None = None,
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert payment-list text with a one-off pipeline."""
    return ConversionPipeline(config).convert(raw_text, record_type, creation_date)
