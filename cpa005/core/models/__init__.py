"""
Core data models for the CPA-005 converter.

All record-like models use Pydantic and are frozen once built.
"""

from .conversion_result import ConversionResult
from .header_metadata import HeaderMetadata
from .payment import PAYMENT_PREFIX_LENGTH, Payment, RecordTypeError
from .payment_row import PaymentRow, RowFormatError, SourceRow
from .payment_segment import SEGMENT_LENGTH, PaymentSegment
from .types import PAYMENT_RECORD_TYPES, CurrencyType, ProcessingCentre, RecordType

__all__ = [
    "ProcessingCentre",
    "CurrencyType",
    "RecordType",
    "PAYMENT_RECORD_TYPES",
    "HeaderMetadata",
    "PaymentRow",
    "RowFormatError",
    "SourceRow",
    "PaymentSegment",
    "SEGMENT_LENGTH",
    "Payment",
    "PAYMENT_PREFIX_LENGTH",
    "RecordTypeError",
    "ConversionResult",
]
