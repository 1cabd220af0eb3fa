"""
RangeValidator - validates integer values are within a specified range.
"""

from typing import Any

from .base_validator import BaseValidator


class RangeValidator(BaseValidator):
    """
    Validates that an integer field is within an inclusive range.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)
    - max_digits: Maximum number of decimal digits; shorthand for max = 10**n - 1
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")
        self.max_digits = self.parameters.get("max_digits")

        if self.max_digits is not None:
            self.max_value = 10 ** self.max_digits - 1

        if self.min_value is None and self.max_value is None:
            raise ValueError("RangeValidator requires at least one of: min, max, max_digits")

    def validate(self, value: Any) -> None:
        """
        Validate that ``value`` is an integer inside the range.

        Raises:
            ValidationError: If value is not an integer or is out of range
        """
        # bool is an int subclass but never a valid amount or count
        if not isinstance(value, int) or isinstance(value, bool):
            raise self._fail(f"{self.field_name} must be an integer, got {type(value).__name__}")

        if self.min_value is not None and value < self.min_value:
            raise self._fail(f"{self.field_name} {value} is less than minimum {self.min_value}")

        if self.max_digits is not None and value > self.max_value:
            raise self._fail(f"{self.field_name} {value} exceeds {self.max_digits} digits")

        if self.max_value is not None and value > self.max_value:
            raise self._fail(f"{self.field_name} {value} exceeds maximum {self.max_value}")

    @property
    def rule_type(self) -> str:
        return "range"
