"""Scroll, selector and search state of a document view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gmir import selector
from gmir.errors import InternalError, InvalidPattern
from gmir.models import LineKind, Mode, SearchDirection, SelectorSpace
from gmir.search import compile_pattern, find_matches, row_highlights, rows_with_matches
from gmir.wrap import WrapCache, WrapResult, wrap

if TYPE_CHECKING:
    import re

    from gmir.document import Document
    from gmir.search import Span

DEFAULT_MAX_TEXT_WIDTH = 72

INFO_INVALID_PATTERN = "Invalid pattern"
INFO_PATTERN_NOT_FOUND = "Pattern not found."
INFO_NO_NEXT_MATCH = "No further match found."
INFO_NO_PREVIOUS_MATCH = "No previous match found."


@dataclass(frozen=True, slots=True)
class LinkTarget:
    """A resolved link selector."""

    url: str


@dataclass(frozen=True, slots=True)
class HeadingTarget:
    """A resolved heading selector: position among the headings and line index in the view's document."""

    ordinal: int
    line_index: int


ResolvedTarget = LinkTarget | HeadingTarget


@dataclass(frozen=True, slots=True)
class VisibleRow:
    """One screen row of the visible window.

    `highlights` are byte spans relative to `text`. `shift` is the number of
    columns the row is scrolled to the left.
    """

    line_index: int
    row: int
    text: str
    kind: LineKind
    highlights: tuple[Span, ...] = ()
    continuation: bool = False
    indent: int = 0
    selector: str = ""
    shift: int = 0


class ViewState:
    """Position of the visible window within a document plus input state.

    `line` is the index of the first displayed line and `line_offset` the
    number of its wrapped rows scrolled out at the top.
    """

    def __init__(
        self,
        document: Document,
        *,
        selector_space: SelectorSpace = SelectorSpace.LINKS,
        width: int = DEFAULT_MAX_TEXT_WIDTH,
        max_text_width: int = DEFAULT_MAX_TEXT_WIDTH,
    ) -> None:
        self._document = document
        self._selector_space = selector_space
        self._max_text_width = max_text_width
        self._wrap = WrapCache(width)
        self._line: int = 0
        self._line_offset: int = 0
        self.col_offset: int = 0
        self.selector_buffer: str = ""
        self.mode: Mode = Mode.REGULAR
        self.search_term: str = ""
        self.pattern: re.Pattern[str] | None = None
        self.info: str = ""

    @property
    def document(self) -> Document:
        return self._document

    @property
    def line(self) -> int:
        return self._line

    @property
    def line_offset(self) -> int:
        return self._line_offset

    @property
    def width(self) -> int:
        """Text width the wrap geometry is currently computed for."""
        return self._wrap.width

    @property
    def selector_space(self) -> SelectorSpace:
        return self._selector_space

    # --- Wrap geometry ---

    def wrapped(self, index: int) -> WrapResult:
        """Wrap result of a wrappable line at the current width."""
        return self._wrap.get(index, self._document[index])

    def max_line_offset(self, index: int) -> int:
        """Largest legal line offset for the line at index. 0 for preformatted lines."""
        if not self._document[index].wrappable:
            return 0
        return self.wrapped(index).max_row

    def fix_line_offset(self, width: int) -> None:
        """Adopt a new text width and clamp the line offset to the new wrap geometry.

        Use after a resize or anything else that changes how lines wrap.
        """
        self._wrap.set_width(width)
        self._clamp_col_offset()
        if self._line_offset == 0:
            return
        if not self._document[self._line].wrappable:
            msg = "line offset for non wrappable line found"
            raise InternalError(msg)
        self._line_offset = min(self._line_offset, self.max_line_offset(self._line))

    # --- Scrolling ---

    def scroll(self, rows: int) -> None:
        """Scroll up (positive) or down (negative) by wrapped rows, never past the top or bottom row."""
        last = len(self._document) - 1
        while rows > 0 and (self._line > 0 or self._line_offset > 0):
            if self._line_offset > 0:
                self._line_offset -= 1
            else:
                self._line -= 1
                self._line_offset = self.max_line_offset(self._line)
            rows -= 1
        while rows < 0 and (self._line < last or self._line_offset < self.max_line_offset(self._line)):
            if self._line_offset == self.max_line_offset(self._line):
                self._line += 1
                self._line_offset = 0
            else:
                self._line_offset += 1
            rows += 1

    def scroll_to_top(self) -> None:
        self._line = 0
        self._line_offset = 0

    def scroll_to_bottom(self) -> None:
        self._line = len(self._document) - 1
        self._line_offset = self.max_line_offset(self._line)

    def scroll_to_next_heading(self) -> None:
        """Jump to the nearest heading after the current line, if any."""
        for index in self._document.heading_indices:
            if index > self._line:
                self._jump_to(index)
                return

    def scroll_to_prev_heading(self) -> None:
        """Jump to the nearest heading before the current line, if any."""
        for index in reversed(self._document.heading_indices):
            if index < self._line:
                self._jump_to(index)
                return

    def scroll_to_nth_heading(self, n: int) -> None:
        """Jump to the n-th (0-based) heading."""
        headings = self._document.heading_indices
        if not 0 <= n < len(headings):
            msg = f"heading {n} out of range (document has {len(headings)})"
            raise InternalError(msg)
        self._jump_to(headings[n])

    def _jump_to(self, index: int, line_offset: int = 0) -> None:
        self._line = index
        self._line_offset = line_offset

    def scroll_horizontally(self, columns: int) -> None:
        """Shift preformatted rows left (positive) or back right (negative)."""
        self.col_offset += columns
        self._clamp_col_offset()

    def _clamp_col_offset(self) -> None:
        limit = max(0, self._document.preformatted_width - self.width)
        self.col_offset = max(0, min(self.col_offset, limit))

    def scroll_percent(self) -> int:
        """Position of the first displayed line as a percentage of the document."""
        return round(100 * (self._line + 1) / len(self._document))

    # --- Selector ---

    def append_digit(self, digit: int) -> None:
        if not 0 <= digit <= 9:  # noqa: PLR2004
            msg = f"{digit!r} is not a digit"
            raise InternalError(msg)
        self.selector_buffer += str(digit)

    def clear_selector(self) -> None:
        self.selector_buffer = ""

    def is_selector_complete(self) -> bool:
        return selector.is_complete(self.selector_buffer)

    def selectable_count(self) -> int:
        return len(self._document.selectable_indices(self._selector_space))

    def resolve_selector(self) -> ResolvedTarget | None:
        """Target of the typed selector, once it is complete.

        A complete selector always clears the buffer; one that points past the
        selectable lines resolves to None.
        """
        if not self.is_selector_complete():
            return None
        index = selector.to_index(self.selector_buffer)
        self.clear_selector()
        indices = self._document.selectable_indices(self._selector_space)
        if index >= len(indices):
            return None
        line_index = indices[index]
        if self._selector_space == SelectorSpace.LINKS:
            url = self._document[line_index].url
            if url is None:
                msg = f"link line {line_index} has no URL"
                raise InternalError(msg)
            return LinkTarget(url)
        return HeadingTarget(ordinal=index, line_index=line_index)

    # --- Search ---

    def begin_search(self, mode: Mode) -> None:
        """Start typing a search term in the given search mode."""
        if mode == Mode.REGULAR:
            msg = "begin_search needs a search mode"
            raise InternalError(msg)
        self.mode = mode
        self.search_term = ""
        self.clear_selector()

    def update_search_term(self, term: str) -> None:
        """Mirror the search term being edited."""
        self.search_term = term

    def end_search(self) -> None:
        self.mode = Mode.REGULAR
        self.search_term = ""

    def set_pattern(self, pattern: str) -> None:
        """Activate a search pattern. On InvalidPattern the previous pattern stays active."""
        self.pattern = compile_pattern(pattern)

    def clear_pattern(self) -> None:
        self.pattern = None

    def submit_search(self, term: str, direction: SearchDirection) -> bool:
        """Finish typing a search, activate term and scroll to the first match at or after the position."""
        self.end_search()
        try:
            self.set_pattern(term)
        except InvalidPattern:
            self.info = INFO_INVALID_PATTERN
            return False
        if not self.scroll_to_next_match(direction, skip_current=False):
            self.info = INFO_PATTERN_NOT_FOUND
            return False
        return True

    def abort_search(self) -> None:
        self.end_search()
        self.clear_pattern()

    def scroll_to_next_match(self, direction: SearchDirection, *, skip_current: bool) -> bool:
        """Scroll to the next wrapped row containing a match in direction.

        With skip_current=False a match in the current row counts. Returns
        False, without scrolling, if there is no such row.
        """
        if self.pattern is None:
            return False
        if direction == SearchDirection.FORWARD:
            return self._scroll_down_to_match(self.pattern, skip_current=skip_current)
        return self._scroll_up_to_match(self.pattern, skip_current=skip_current)

    def _scroll_down_to_match(self, pattern: re.Pattern[str], *, skip_current: bool) -> bool:
        for index in range(self._line, len(self._document)):
            line = self._document[index]
            matches = find_matches(pattern, line.text)
            if not matches:
                continue
            if line.wrappable:
                for offset in rows_with_matches(self.wrapped(index), matches):
                    if (
                        index > self._line
                        or (skip_current and offset > self._line_offset)
                        or (not skip_current and offset >= self._line_offset)
                    ):
                        self._jump_to(index, offset)
                        return True
            elif index > self._line or not skip_current:
                self._jump_to(index)
                return True
        return False

    def _scroll_up_to_match(self, pattern: re.Pattern[str], *, skip_current: bool) -> bool:
        for index in range(self._line, -1, -1):
            line = self._document[index]
            matches = find_matches(pattern, line.text)
            if not matches:
                continue
            if line.wrappable:
                for offset in reversed(rows_with_matches(self.wrapped(index), matches)):
                    if (
                        index < self._line
                        or (skip_current and offset < self._line_offset)
                        or (not skip_current and offset <= self._line_offset)
                    ):
                        self._jump_to(index, offset)
                        return True
            elif index < self._line or not skip_current:
                self._jump_to(index)
                return True
        return False

    # --- Layout and rendering queries ---

    def selector_column_width(self) -> int:
        return selector.column_width(self.selectable_count())

    def column_widths(self, screen_width: int) -> tuple[int, int, int]:
        """Split the screen into (left space, selector column, text width).

        Text is capped at the maximum text width; any space left over centers it.
        """
        selector_width = self.selector_column_width()
        left_space = 0
        if screen_width >= self._max_text_width + selector_width:
            text_width = self._max_text_width
            space = screen_width - (self._max_text_width + selector_width)
            if space > selector_width + 2:
                left_space = space // 2 - selector_width
        else:
            text_width = screen_width - selector_width
        return left_space, selector_width, text_width

    def _wrap_at(self, index: int, width: int) -> WrapResult:
        if width == self.width:
            return self.wrapped(index)
        return wrap(self._document[index], width)

    def visible_rows(self, width: int, height: int) -> list[VisibleRow]:
        """Rows to paint for a window of height rows with text width columns."""
        rows: list[VisibleRow] = []
        ordinals = self._document.ordinals(self._selector_space)
        for index in range(self._line, len(self._document)):
            if len(rows) >= height:
                break
            line = self._document[index]
            label = selector.from_index(ordinals[index]) if index in ordinals else ""
            matches = find_matches(self.pattern, line.text) if self.pattern is not None else []
            if not line.wrappable:
                rows.append(
                    VisibleRow(
                        line_index=index,
                        row=0,
                        text=line.text,
                        kind=line.kind,
                        highlights=tuple(matches),
                        selector=label,
                        shift=self.col_offset,
                    )
                )
                continue
            wrapped = self._wrap_at(index, width)
            first = self._line_offset if index == self._line else 0
            for row, (text, spans) in enumerate(zip(wrapped.rows(), row_highlights(matches, wrapped), strict=True)):
                if row < first:
                    continue
                if len(rows) >= height:
                    break
                rows.append(
                    VisibleRow(
                        line_index=index,
                        row=row,
                        text=text,
                        kind=line.kind,
                        highlights=tuple(spans),
                        continuation=row > 0,
                        indent=line.indent_width if row > 0 else 0,
                        selector=label if row == first else "",
                    )
                )
        return rows
