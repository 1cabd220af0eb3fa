"""
Dollar-amount parsing.

Converts human-formatted currency text such as "$1,234.56" into integer cents.
"""

from decimal import Decimal, InvalidOperation

# Formatting characters dropped before parsing
IGNORED_CHARACTERS = frozenset(", $")
ALLOWED_CHARACTERS = frozenset("0123456789.")

# The amount field holds 10 digits of cents, so 8 digits of dollars
MAX_DOLLAR_DIGITS = 8


class AmountParseError(ValueError):
    """Raised when an amount cannot be converted to cents."""

    def __init__(self, amount: str, reason: str):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Failed to parse payment amount {amount!r}: {reason}")


def parse_dollar_amount_to_cents(amount: str) -> int:
    """
    Parse a dollar amount into unsigned integer cents.

    Digits and a decimal point are kept; commas, spaces and ``$`` are
    dropped; any other character (including a minus sign) is rejected.
    Input must be an exact number of cents: an amount with a fraction of a
    cent is rejected, never rounded. At most 8 dollar digits are accepted.

    Args:
        amount: Text such as "$1,234.56" or "100"

    Returns:
        Amount in cents

    Raises:
        AmountParseError: If the text is not a valid non-negative amount

    Examples:
        >>> parse_dollar_amount_to_cents("$1,234.56")
        123456
        >>> parse_dollar_amount_to_cents("12.340")
        1234
    """
    kept = []
    for char in amount:
        if char in ALLOWED_CHARACTERS:
            kept.append(char)
        elif char in IGNORED_CHARACTERS:
            continue
        else:
            raise AmountParseError(amount, f"unexpected character {char!r}")

    sanitized = "".join(kept)
    if not sanitized:
        raise AmountParseError(amount, "no digits found")
    if sanitized.count(".") > 1:
        raise AmountParseError(amount, "more than one decimal point")

    # Bounded on the text; Decimal only sees amounts that fit the field
    whole_dollars = sanitized.partition(".")[0].lstrip("0")
    if len(whole_dollars) > MAX_DOLLAR_DIGITS:
        raise AmountParseError(amount, f"more than {MAX_DOLLAR_DIGITS} dollar digits")

    try:
        dollars = Decimal(sanitized)
    except InvalidOperation:
        raise AmountParseError(amount, "not a decimal number") from None

    cents = dollars * 100
    if cents != cents.to_integral_value():
        raise AmountParseError(amount, "fractions of a cent are not allowed")

    return int(cents)
