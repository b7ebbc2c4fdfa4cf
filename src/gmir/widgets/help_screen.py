"""Help screen showing all keyboard shortcuts."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static
from typing_extensions import override

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

HELP_TEXT = """\
[bold]Navigation[/bold]
  Up/Down                               Scroll one line
  PgUp/PgDn                             Scroll half a page
  g                                     Go to the top
  G                                     Go to the bottom
  h                                     Go to next heading
  H                                     Go to previous heading
  Left/Right                            Shift preformatted text
  t                                     Toggle table of contents

[bold]Search[/bold]
  /                                     Search forward (regex)
  ?                                     Search backward (regex)
  n                                     Next match
  p                                     Previous match
  Up/Down in the prompt                 Browse search history

[bold]Selection[/bold]
  0-9                                   Enter link number
                                        (heading number in the table of contents)
  Esc                                   Clear input

  Numbers need no Enter: 1-9 select directly, 010-099 with
  one leading zero, 00100-00999 with two, and so on.
  The URL of a selected link is printed on exit.

[bold]General[/bold]
  F1                                    Show this help
  q                                     Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 60%;
        height: 90%;
        max-height: 35;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("f1", "dismiss_help", "Close"),
        ("q", "dismiss_help", "Close"),
    ]

    @override
    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
