"""Self-delimiting numeric selectors.

A selector is typed digit by digit without a terminating key. The number of
leading zeros announces how many more digits follow: ``"5"`` is complete,
``"03"`` still waits for one more digit (``"034"``), ``"00"`` waits for three.
"""

from __future__ import annotations

from gmir.errors import InternalError


def is_complete(selector: str) -> bool:
    """Whether selector has exactly as many digits as its leading zeros announce.

    A selector longer than that can never become complete. This is accepted.
    """
    leading_zeros = len(selector) - len(selector.lstrip("0"))
    return len(selector) == leading_zeros * 2 + 1


def from_index(index: int) -> str:
    """Canonical selector for the 0-based index."""
    number = str(index + 1)
    return "0" * (len(number) - 1) + number


def to_index(selector: str) -> int:
    """0-based index selected by a complete selector."""
    if not selector.isdigit() or not selector.isascii():
        msg = f"invalid selector {selector!r}"
        raise InternalError(msg)
    n = int(selector)
    if n < 1:
        msg = f"invalid selector {selector!r}"
        raise InternalError(msg)
    return n - 1


def column_width(count: int) -> int:
    """Width of a column holding the selectors of count items plus a separating space."""
    if count <= 0:
        return 0
    return len(from_index(count - 1)) + 1
