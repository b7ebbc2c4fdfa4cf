"""Bottom status bar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.cells import cell_len
from rich.text import Text
from textual.widget import Widget

from gmir.models import Mode
from gmir.styles import DEFAULT_STYLES, StyleConfig

if TYPE_CHECKING:
    from gmir.view_state import ViewState

_SEARCH_PREFIXES: dict[Mode, str] = {
    Mode.SEARCH: "/",
    Mode.REVERSE_SEARCH: "?",
}


class StatusBar(Widget):
    """Status bar showing info messages, the typed selector or the title, and the scroll percentage."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
    }
    """

    def __init__(
        self,
        view_state: ViewState,
        title: str = "",
        styles: StyleConfig = DEFAULT_STYLES,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id)
        self._state = view_state
        self._title = title
        self._styles = styles
        self._toc: bool = False

    def set_view_state(self, view_state: ViewState, *, toc: bool = False) -> None:
        """Show the state of another view (main document or table of contents)."""
        self._state = view_state
        self._toc = toc
        self.refresh()

    def left_text(self) -> str:
        """Text on the left side, by priority: info, search term, selector, title."""
        state = self._state
        if state.info:
            return state.info
        if state.mode in _SEARCH_PREFIXES:
            return _SEARCH_PREFIXES[state.mode] + state.search_term
        if state.selector_buffer:
            return state.selector_buffer
        if self._toc:
            return f"Contents: {self._title}" if self._title else "Contents"
        return self._title

    def render(self) -> Text:
        width = self.size.width
        percent = f"{self._state.scroll_percent()}%"
        left = Text(self.left_text())
        left.truncate(max(0, width - len(percent) - 1), overflow="ellipsis")
        text = Text(style=self._styles.bar, no_wrap=True)
        text.append_text(left)
        text.append(" " * max(1, width - cell_len(left.plain) - len(percent)))
        text.append(percent)
        return text
