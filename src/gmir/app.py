"""Textual application for gmir."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType

from gmir.models import AppConfig, Mode, SearchDirection, SelectorSpace
from gmir.search import SearchHistory
from gmir.styles import DEFAULT_STYLES, StyleConfig
from gmir.view_state import (
    INFO_NO_NEXT_MATCH,
    INFO_NO_PREVIOUS_MATCH,
    HeadingTarget,
    LinkTarget,
    ViewState,
)
from gmir.widgets.document_view import DocumentView
from gmir.widgets.help_screen import HelpScreen
from gmir.widgets.search_dialog import SearchDialog
from gmir.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from gmir.document import Document

logger = logging.getLogger(__name__)

_HORIZONTAL_STEP = 4


class GmirApp(App[str | None]):
    """Gemtext reader TUI application. Exits with the URL of the selected link, if any."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("up", "scroll_rows(1)", "Up", show=False),
        Binding("down", "scroll_rows(-1)", "Down", show=False),
        Binding("pageup", "scroll_page(1)", "Page Up", show=False),
        Binding("pagedown", "scroll_page(-1)", "Page Down", show=False),
        Binding("left", "shift(-1)", "Left", show=False),
        Binding("right", "shift(1)", "Right", show=False),
        Binding("g", "scroll_top", "Top", show=False),
        Binding("G", "scroll_bottom", "Bottom", show=False),
        Binding("h", "next_heading", "Next heading", show=False),
        Binding("H", "prev_heading", "Previous heading", show=False),
        Binding("t", "toggle_toc", "Contents", show=False),
        Binding("slash", "search(True)", "Search", show=False),
        Binding("question_mark", "search(False)", "Search back", show=False),
        Binding("n", "next_match", "Next", show=False),
        Binding("p", "prev_match", "Prev", show=False),
        Binding("escape", "clear_input", "Clear", show=False),
        Binding("f1", "show_help", "Help", show=False),
        Binding("q", "quit_reader", "Quit", show=False),
        *(Binding(str(d), f"digit({d})", str(d), show=False) for d in range(10)),
    ]

    def __init__(
        self,
        document: Document,
        source: str = "",
        config: AppConfig | None = None,
        styles: StyleConfig = DEFAULT_STYLES,
    ) -> None:
        super().__init__()
        self._document = document
        self._source = source
        self._config = config or AppConfig()
        self._styles = styles
        self._main = ViewState(document, max_text_width=self._config.max_text_width)
        toc_document = document.heading_projection()
        self._toc: ViewState | None = None
        if toc_document is not None:
            self._toc = ViewState(
                toc_document,
                selector_space=SelectorSpace.HEADINGS,
                max_text_width=self._config.max_text_width,
            )
        self._active = self._main
        self._history = SearchHistory()
        if self._config.theme in self.available_themes:
            self.theme = self._config.theme
        else:
            logger.warning("Unknown theme %r in config, using %r", self._config.theme, self.theme)

    @property
    def active_view(self) -> ViewState:
        """The view state keys currently act on."""
        return self._active

    @property
    def main_view(self) -> ViewState:
        return self._main

    @property
    def toc_view(self) -> ViewState | None:
        return self._toc

    @property
    def search_history(self) -> SearchHistory:
        return self._history

    def compose(self) -> ComposeResult:
        yield DocumentView(self._main, self._styles, id="document-view")
        yield StatusBar(self._main, title=self._document.title or self._source, styles=self._styles, id="status-bar")

    def _document_view(self) -> DocumentView:
        return self.query_one("#document-view", DocumentView)

    def _redraw(self) -> None:
        self._document_view().refresh()
        self.query_one("#status-bar", StatusBar).refresh()

    def _activate(self, state: ViewState) -> None:
        """Make state the active view. Main view and table of contents share nothing else."""
        self._active = state
        self._document_view().view_state = state
        self.query_one("#status-bar", StatusBar).set_view_state(state, toc=state is self._toc)

    def _regular_key(self) -> ViewState:
        """Every regular key press clears the info message first."""
        self._active.info = ""
        return self._active

    # --- Navigation ---

    def action_scroll_rows(self, rows: int) -> None:
        self._regular_key().scroll(rows)
        self._redraw()

    def action_scroll_page(self, direction: int) -> None:
        self._regular_key().scroll(direction * self._document_view().page_rows)
        self._redraw()

    def action_shift(self, direction: int) -> None:
        self._regular_key().scroll_horizontally(direction * _HORIZONTAL_STEP)
        self._redraw()

    def action_scroll_top(self) -> None:
        self._regular_key().scroll_to_top()
        self._redraw()

    def action_scroll_bottom(self) -> None:
        self._regular_key().scroll_to_bottom()
        self._redraw()

    def action_next_heading(self) -> None:
        self._regular_key().scroll_to_next_heading()
        self._redraw()

    def action_prev_heading(self) -> None:
        self._regular_key().scroll_to_prev_heading()
        self._redraw()

    def action_toggle_toc(self) -> None:
        state = self._regular_key()
        if self._toc is None:
            state.info = "No headings."
            self._redraw()
            return
        state.clear_selector()
        self._activate(self._main if state is self._toc else self._toc)

    # --- Search ---

    def action_search(self, forward: bool) -> None:  # noqa: FBT001
        state = self._regular_key()
        state.begin_search(Mode.SEARCH if forward else Mode.REVERSE_SEARCH)
        self._redraw()
        self.push_screen(
            SearchDialog(state.mode, self._history, on_change=self._on_search_changed),
            callback=self._on_search_result,
        )

    def _on_search_changed(self, term: str) -> None:
        self._active.update_search_term(term)
        self.query_one("#status-bar", StatusBar).refresh()

    def _on_search_result(self, result: str | None) -> None:
        state = self._active
        if result is None:
            state.abort_search()
        else:
            direction = SearchDirection.BACKWARD if state.mode == Mode.REVERSE_SEARCH else SearchDirection.FORWARD
            self._history.add(result)
            state.submit_search(result, direction)
        self._redraw()

    def action_next_match(self) -> None:
        state = self._regular_key()
        if not state.scroll_to_next_match(SearchDirection.FORWARD, skip_current=True):
            state.info = INFO_NO_NEXT_MATCH
        self._redraw()

    def action_prev_match(self) -> None:
        state = self._regular_key()
        if not state.scroll_to_next_match(SearchDirection.BACKWARD, skip_current=True):
            state.info = INFO_NO_PREVIOUS_MATCH
        self._redraw()

    # --- Selection ---

    def action_clear_input(self) -> None:
        self._regular_key().clear_selector()
        self._redraw()

    def action_digit(self, digit: int) -> None:
        state = self._regular_key()
        state.append_digit(digit)
        target = state.resolve_selector()
        if isinstance(target, LinkTarget):
            self.log(f"selected link {target.url}")
            self.exit(target.url)
            return
        if isinstance(target, HeadingTarget):
            self.log(f"jump to heading {target.ordinal} at line {target.line_index}")
            self._main.scroll_to_nth_heading(target.ordinal)
            self._activate(self._main)
        self._redraw()

    # --- General ---

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_quit_reader(self) -> None:
        self.exit(None)
