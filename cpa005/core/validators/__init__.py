"""
Field contract validators.

Provides validators for text length, digit-only charset and integer ranges.
"""

from .base_validator import BaseValidator, ValidationError
from .digits_validator import DigitsValidator
from .length_validator import LengthValidator
from .range_validator import RangeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "LengthValidator",
    "DigitsValidator",
    "RangeValidator",
]
