"""Exception taxonomy for gmir."""

from __future__ import annotations


class GmirError(Exception):
    """Base class for recoverable, user-facing errors."""


class ParseError(GmirError):
    """The input could not be turned into a document."""


class EmptyDocumentError(ParseError):
    """The input contained no lines."""

    def __init__(self) -> None:
        super().__init__("given GMI is empty")


class InvalidPattern(GmirError):
    """A search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid search pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class InternalError(AssertionError):
    """An internal invariant was violated. Indicates a bug, never caught."""
