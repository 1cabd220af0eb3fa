"""
DigitsValidator - validates that a field holds ASCII digits only.
"""

import re
from typing import Any

from .base_validator import BaseValidator

# str.isdigit() accepts superscripts and other Unicode digits; the file format does not.
ASCII_DIGITS = re.compile(r"[0-9]*")


class DigitsValidator(BaseValidator):
    """
    Validates that a value contains nothing but the characters 0-9.

    Parameters:
    - allow_empty: Accept the empty string (default True)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.allow_empty = self.parameters.get("allow_empty", True)

    def validate(self, value: Any) -> None:
        """
        Validate that ``value`` is all ASCII digits.

        Raises:
            ValidationError: If any character is not a digit
        """
        if not isinstance(value, str):
            raise self._fail(f"{self.field_name} must be text, got {type(value).__name__}")

        if value == "" and not self.allow_empty:
            raise self._fail(f"{self.field_name} must not be empty")

        if not ASCII_DIGITS.fullmatch(value):
            raise self._fail(f"{self.field_name} must only include digits")

    @property
    def rule_type(self) -> str:
        return "digits"
