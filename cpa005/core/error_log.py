"""
ErrorLog - ordered collection of human-readable validation messages.

Every builder owns one ErrorLog and merges it upward into its parent, so a
single conversion can report every problem it found in one pass.
"""

from collections.abc import Iterator


class ErrorLog:
    """
    Append-only list of error messages.

    Messages keep insertion order and are never deduplicated. Merging another
    log appends its messages after the existing ones.
    """

    def __init__(self, messages: list[str] | None = None):
        self._messages: list[str] = list(messages or [])

    def write(self, message: str) -> None:
        """Append a single message."""
        self._messages.append(message)

    def merge(self, other: "ErrorLog") -> None:
        """Append all of ``other``'s messages, preserving both orders."""
        self._messages.extend(other._messages)

    def is_empty(self) -> bool:
        """Return True when no error has been written."""
        return not self._messages

    def as_text(self) -> str:
        """Render the log for display, one message per line."""
        return "\n".join(self._messages)

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __repr__(self) -> str:
        return f"ErrorLog(errors={len(self._messages)})"
