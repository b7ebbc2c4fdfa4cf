"""Search term prompt shown over the status bar."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import ModalScreen
from textual.widgets import Input, Label

from gmir.models import Mode

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.app import ComposeResult
    from textual.binding import BindingType

    from gmir.search import SearchHistory


class SearchDialog(ModalScreen[str | None]):
    """One-line prompt for a search pattern with session history.

    Dismisses with the pattern, or None when aborted. Submitting an empty
    prompt repeats the latest search.
    """

    DEFAULT_CSS = """
    SearchDialog {
        align: left bottom;
        background: transparent;
    }

    SearchDialog > Horizontal {
        width: 100%;
        height: 1;
        background: $primary;
    }

    SearchDialog > Horizontal > Label {
        width: auto;
    }

    SearchDialog > Horizontal > Input {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $primary;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "cancel", "Cancel"),
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(
        self,
        mode: Mode,
        history: SearchHistory,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__()
        self._mode = mode
        self._search_history = history
        self._history = history.entries
        self._history_index = len(self._history)
        self._on_change = on_change

    def compose(self) -> ComposeResult:
        prefix = "?" if self._mode == Mode.REVERSE_SEARCH else "/"
        with Horizontal():
            yield Label(prefix)
            yield Input(placeholder="search pattern (regex)", id="search-input")

    def on_input_changed(self, event: Input.Changed) -> None:
        if self._on_change is None:
            return
        self._on_change(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        pattern = event.value
        if not pattern:
            self.dismiss(self._search_history.latest())
            return
        self.dismiss(pattern)

    def _show_history_entry(self) -> None:
        search_input = self.query_one("#search-input", Input)
        if self._history_index < len(self._history):
            search_input.value = self._history[self._history_index]
        else:
            search_input.value = ""
        search_input.cursor_position = len(search_input.value)

    def action_history_previous(self) -> None:
        if self._history_index > 0:
            self._history_index -= 1
            self._show_history_entry()

    def action_history_next(self) -> None:
        if self._history_index < len(self._history):
            self._history_index += 1
            self._show_history_entry()

    def action_cancel(self) -> None:
        self.dismiss(None)
