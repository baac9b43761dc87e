"""Exceptions raised by stacktrace-tree.

Permissive parsing (the default) never raises for ``str`` input; these are
only raised by opt-in strict bracket validation.
"""

from __future__ import annotations

__all__ = ["BracketMismatchError", "StacktraceError", "StacktraceParseError"]


class StacktraceError(Exception):
    """Base error for this package."""


class StacktraceParseError(StacktraceError):
    """Raised when a line cannot be parsed under the active configuration."""


class BracketMismatchError(StacktraceParseError):
    """Raised in strict bracket mode when brackets do not pair up.

    Attributes:
        position: Character offset in the tokenized text where the problem
                  was detected (``len(text)`` for an unterminated bracket).
        expected: The closing bracket that would have been valid, or None
                  when no bracket was open.
        found:    The closing bracket encountered, or None at end of input.
    """

    def __init__(
        self, position: int, expected: str | None, found: str | None
    ) -> None:
        self.position = position
        self.expected = expected
        self.found = found
        if expected is None:
            detail = f"unexpected closing bracket {found!r}"
        elif found is None:
            detail = f"unterminated bracket, expected {expected!r}"
        else:
            detail = f"expected {expected!r}, found {found!r}"
        super().__init__(f"{detail} at position {position}")
