"""Width-aware line wrapping.

Breakpoints are UTF-8 byte offsets into a line's display text. Every offset
lies on a scalar boundary, so rows can be sliced from the encoded text and
decoded independently.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from wcwidth import wcwidth

from gmir.errors import InternalError
from gmir.models import Line


def char_width(ch: str) -> int:
    """Display columns of a single scalar (0, 1 or 2). Non-printables count as 0."""
    return max(wcwidth(ch), 0)


def display_width(text: str) -> int:
    """Display columns of a string."""
    return sum(char_width(ch) for ch in text)


def _utf8_len(ch: str) -> int:
    cp = ord(ch)
    if cp < 0x80:  # noqa: PLR2004
        return 1
    if cp < 0x800:  # noqa: PLR2004
        return 2
    if cp < 0x10000:  # noqa: PLR2004
        return 3
    return 4


def utf8_offsets(text: str) -> list[int]:
    """Byte offset of every character in text, plus the total byte length at the end."""
    offsets = [0]
    total = 0
    for ch in text:
        total += _utf8_len(ch)
        offsets.append(total)
    return offsets


def byte_to_char(offsets: list[int], byte_offset: int) -> int:
    """Map a byte offset back to a character index using a table from utf8_offsets."""
    return bisect.bisect_left(offsets, byte_offset)


@dataclass(frozen=True, slots=True)
class WrapResult:
    """Wrap breakpoints of a display text at some width."""

    text: str
    breakpoints: tuple[int, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.breakpoints) + 1

    @property
    def max_row(self) -> int:
        """Index of the last wrapped row."""
        return len(self.breakpoints)

    def row_starts(self) -> list[int]:
        """Byte offset at which each row starts."""
        return [0, *self.breakpoints]

    def row_of(self, byte_offset: int) -> int:
        """Row containing byte_offset: the first k with byte_offset < breakpoints[k], else the last row."""
        return bisect.bisect_right(self.breakpoints, byte_offset)

    def rows(self) -> list[str]:
        """The text of every row, in order."""
        if not self.breakpoints:
            return [self.text]
        data = self.text.encode()
        bounds = [0, *self.breakpoints, len(data)]
        return [data[start:end].decode() for start, end in zip(bounds, bounds[1:], strict=False)]


def wrap(line: Line, width: int) -> WrapResult:
    """Compute where line must break to fit into width columns."""
    if not line.wrappable:
        msg = f"tried to wrap a {line.kind} line"
        raise InternalError(msg)
    return WrapResult(line.text, tuple(wrap_indexes(line.text, width, line.indent_width)))


def wrap_indexes(text: str, width: int, indent: int) -> list[int]:
    """Byte offsets before which text wraps at width, keeping indent columns free on continuation rows.

    The first indent characters are the line's prefix (e.g. '=> ') and are never
    wrapped themselves.
    """
    if indent < 0:
        msg = "tried to wrap with negative indent"
        raise InternalError(msg)
    if width <= indent:
        return []
    trimmed = text.rstrip(" ")
    remaining = display_width(trimmed)
    if remaining <= width:
        return []

    budget = width - indent
    char_indexes: list[int] = []
    i = indent
    remaining -= indent  # prefixes are ASCII, one column per character
    while remaining > budget:
        if len(trimmed) - i <= 1:
            # A single scalar wider than the budget is left to overflow.
            break
        start = i
        i += _next_wrap_index(text[i:], budget) + 1
        remaining -= display_width(trimmed[start:i])
        char_indexes.append(i)

    offsets = utf8_offsets(text)
    return [offsets[ci] for ci in char_indexes]


def _next_wrap_index(text: str, width: int) -> int:
    """Index of the character after which to wrap text, which must not fit in width."""
    index = _last_space_within(text, width + 1)
    if index == -1:
        index = _last_index_within(text, width)
    result = index
    for j, ch in enumerate(text[index + 1 :], start=index + 1):
        if char_width(ch) != 0 and ch != " ":
            break
        result = j
    return result


def _last_space_within(text: str, width: int) -> int:
    last_space = -1
    seen = 0
    for i, ch in enumerate(text):
        seen += char_width(ch)
        if seen > width:
            break
        if ch == " ":
            last_space = i
    return last_space


def _last_index_within(text: str, width: int) -> int:
    """Index of the last character that fits in width.

    If not even the first character fits, 0 is returned so that it gets a row
    of its own.
    """
    seen = 0
    for i, ch in enumerate(text):
        seen += char_width(ch)
        if seen > width:
            return 0 if i == 0 else i - 1
    msg = "text fits within width"
    raise InternalError(msg)


class WrapCache:
    """Memoized wrap results per line index, valid for a single width."""

    def __init__(self, width: int = 0) -> None:
        self._width = width
        self._results: dict[int, WrapResult] = {}

    @property
    def width(self) -> int:
        return self._width

    def set_width(self, width: int) -> bool:
        """Switch to width, dropping every cached result if it changed. Returns whether it changed."""
        if width == self._width:
            return False
        self._width = width
        self._results.clear()
        return True

    def get(self, index: int, line: Line) -> WrapResult:
        """Wrap result of the line at index, computing it on first use."""
        result = self._results.get(index)
        if result is None:
            result = wrap(line, self._width)
            self._results[index] = result
        return result

    def __len__(self) -> int:
        return len(self._results)
