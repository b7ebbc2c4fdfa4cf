"""Reflowed gemtext display widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.segment import Segment
from textual.strip import Strip
from textual.widget import Widget

from gmir.styles import DEFAULT_STYLES, StyleConfig
from gmir.wrap import byte_to_char, utf8_offsets

if TYPE_CHECKING:
    from textual import events

    from gmir.view_state import ViewState, VisibleRow

# Below this many text columns nothing is drawn.
_MIN_TEXT_WIDTH = 8


class DocumentView(Widget, can_focus=True):
    """Paints the rows of a ViewState using the Line API.

    The screen is split into left space, a right-aligned selector column and
    the reflowed text. Preformatted lines may run into the space on the right.
    """

    DEFAULT_CSS = """
    DocumentView {
        background: $surface;
        height: 1fr;
    }
    """

    def __init__(self, view_state: ViewState, styles: StyleConfig = DEFAULT_STYLES, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init__(**kwargs)
        self._state = view_state
        self._styles = styles
        self._rows_key: tuple[object, ...] | None = None
        self._rows: list[VisibleRow] = []

    @property
    def view_state(self) -> ViewState:
        return self._state

    @view_state.setter
    def view_state(self, state: ViewState) -> None:
        self._state = state
        self._rows_key = None
        self._sync_width()
        self.refresh()

    @property
    def text_width(self) -> int:
        _, _, text_width = self._state.column_widths(self.size.width)
        return text_width

    @property
    def page_rows(self) -> int:
        """Rows scrolled by PageUp/PageDown: half the visible height."""
        return max(1, self.size.height // 2)

    def _sync_width(self) -> None:
        text_width = self.text_width
        if text_width > 0:
            self._state.fix_line_offset(text_width)

    def on_resize(self, _event: events.Resize) -> None:
        self._rows_key = None
        self._sync_width()
        self.refresh()

    def _visible_rows(self, text_width: int, height: int) -> list[VisibleRow]:
        state = self._state
        key = (
            id(state),
            state.line,
            state.line_offset,
            state.col_offset,
            state.pattern,
            text_width,
            height,
        )
        if key != self._rows_key:
            self._rows = state.visible_rows(text_width, height)
            self._rows_key = key
        return self._rows

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        left_space, selector_width, text_width = self._state.column_widths(width)
        if text_width < _MIN_TEXT_WIDTH:
            return Strip.blank(width, self.rich_style)
        rows = self._visible_rows(text_width, self.size.height)
        if y >= len(rows):
            return Strip.blank(width, self.rich_style)
        row = rows[y]

        prefix: list[Segment] = []
        if left_space:
            prefix.append(Segment(" " * left_space))
        if selector_width:
            prefix.append(Segment(row.selector.rjust(selector_width - 1) + " ", self._styles.selector))
        if row.indent:
            prefix.append(Segment(" " * row.indent))

        content = Strip(self._row_segments(row))
        if row.shift:
            content = content.crop(row.shift, content.cell_length)
        strip = Strip.join([Strip(prefix), content])
        return strip.crop(0, width).extend_cell_length(width).apply_style(self.rich_style)

    def _row_segments(self, row: VisibleRow) -> list[Segment]:
        """Split a row into plain and highlighted segments."""
        style = self._styles.for_kind(row.kind)
        if not row.highlights:
            return [Segment(row.text, style)]
        offsets = utf8_offsets(row.text)
        highlight_style = self._styles.highlighted(row.kind)
        segments: list[Segment] = []
        pos = 0
        for byte_start, byte_end in row.highlights:
            start = byte_to_char(offsets, byte_start)
            end = byte_to_char(offsets, byte_end)
            if start > pos:
                segments.append(Segment(row.text[pos:start], style))
            segments.append(Segment(row.text[start:end], highlight_style))
            pos = end
        if pos < len(row.text):
            segments.append(Segment(row.text[pos:], style))
        return segments
