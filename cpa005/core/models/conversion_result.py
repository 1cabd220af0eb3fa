"""
ConversionResult model representing the outcome of one conversion (ephemeral).
"""

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
    """
    Outcome of converting a payment list into a CPA-005 file.

    A conversion is atomic: when any error was logged, ``output`` is empty and
    ``errors`` lists every problem found.

    Attributes:
        ok: Whether the conversion succeeded
        output: Rendered CPA-005 file text (empty on failure)
        errors: Every error message, in discovery order
        payment_count: Detail records written
        skipped_rows: Data rows skipped silently (blank customer number or suspended)
    """

    ok: bool
    output: str = ""
    errors: list[str] = Field(default_factory=list)
    payment_count: int = Field(0, ge=0)
    skipped_rows: int = Field(0, ge=0)

    @property
    def error_text(self) -> str:
        """Newline-joined errors for display."""
        return "\n".join(self.errors)

    @property
    def text(self) -> str:
        """The file text on success, the error text on failure."""
        return self.output if self.ok else self.error_text
