"""Search engine: regex matches mapped onto wrapped rows."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gmir.errors import InvalidPattern
from gmir.wrap import utf8_offsets

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gmir.wrap import WrapResult

Span = tuple[int, int]


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a search pattern, raising InvalidPattern for malformed expressions."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


def find_matches(pattern: re.Pattern[str], text: str) -> list[Span]:
    """All non-overlapping matches in text as (start, end) UTF-8 byte offsets."""
    matches = list(pattern.finditer(text))
    if not matches:
        return []
    offsets = utf8_offsets(text)
    return [(offsets[m.start()], offsets[m.end()]) for m in matches]


def rows_with_matches(wrapped: WrapResult, matches: Sequence[Span]) -> list[int]:
    """Wrapped rows in which at least one match starts, ascending and without duplicates."""
    rows: list[int] = []
    for start, _ in matches:
        row = wrapped.row_of(start)
        if not rows or rows[-1] != row:
            rows.append(row)
    return rows


def row_highlights(matches: Sequence[Span], wrapped: WrapResult) -> list[list[Span]]:
    """Split match spans of a logical line into spans relative to each wrapped row."""
    data_len = len(wrapped.text.encode())
    starts = wrapped.row_starts()
    ends = [*wrapped.breakpoints, data_len]
    result: list[list[Span]] = []
    for row_start, row_end in zip(starts, ends, strict=True):
        row_len = row_end - row_start
        spans: list[Span] = []
        for start, end in matches:
            s = max(start - row_start, 0)
            e = min(end - row_start, row_len)
            if s < e:
                spans.append((s, e))
        result.append(spans)
    return result


class SearchHistory:
    """Search terms submitted during this session, oldest first."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def add(self, term: str) -> None:
        """Remember term unless it is empty or repeats the latest entry."""
        if not term:
            return
        if self._entries and self._entries[-1] == term:
            return
        self._entries.append(term)

    def latest(self) -> str | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)
