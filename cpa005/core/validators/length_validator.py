"""
LengthValidator - validates the character length of a text field.
"""

from typing import Any

from .base_validator import BaseValidator


class LengthValidator(BaseValidator):
    """
    Validates that a text value fits its fixed-width field.

    Parameters:
    - exact: Required length
    - max: Maximum length (inclusive)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.exact = self.parameters.get("exact")
        self.max_length = self.parameters.get("max")

        if self.exact is None and self.max_length is None:
            raise ValueError("LengthValidator requires one of: exact, max")

    def validate(self, value: Any) -> None:
        """
        Validate the length of ``value``.

        Raises:
            ValidationError: If the value is not text or has the wrong length
        """
        if not isinstance(value, str):
            raise self._fail(f"{self.field_name} must be text, got {type(value).__name__}")

        if self.exact is not None and len(value) != self.exact:
            raise self._fail(
                f"{self.field_name} must be exactly {self.exact} characters long, "
                f"received {len(value)} instead"
            )

        if self.max_length is not None and len(value) > self.max_length:
            raise self._fail(
                f"{self.field_name} must not exceed {self.max_length} characters, "
                f"received {len(value)}"
            )

    @property
    def rule_type(self) -> str:
        return "length"
