"""Data models and enums for gmir."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field


class LineKind(StrEnum):
    """Kind of a gemtext line."""

    TEXT = "text"
    LINK = "link"
    PREFORMATTED = "preformatted"
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    LIST = "list"
    QUOTE = "quote"


HEADING_KINDS: frozenset[LineKind] = frozenset({LineKind.HEADING1, LineKind.HEADING2, LineKind.HEADING3})


class Mode(StrEnum):
    """Input mode of a view."""

    REGULAR = "regular"
    SEARCH = "search"
    REVERSE_SEARCH = "reverse_search"


class SearchDirection(StrEnum):
    """Direction for text search."""

    FORWARD = "forward"
    BACKWARD = "backward"


class SelectorSpace(StrEnum):
    """Which lines a typed selector picks from."""

    LINKS = "links"
    HEADINGS = "headings"


class AppConfig(BaseModel):
    """Application configuration read from disk."""

    max_text_width: int = Field(default=72, gt=0)
    show_urls: bool = True
    theme: str = "textual-dark"


_PREFIXES: dict[LineKind, str] = {
    LineKind.TEXT: "",
    LineKind.LINK: "=> ",
    LineKind.PREFORMATTED: "",
    LineKind.HEADING1: "# ",
    LineKind.HEADING2: "## ",
    LineKind.HEADING3: "### ",
    LineKind.LIST: "* ",
    LineKind.QUOTE: "> ",
}

_INDENT_WIDTHS: dict[LineKind, int] = {
    LineKind.TEXT: 0,
    LineKind.LINK: 3,
    LineKind.PREFORMATTED: 0,
    LineKind.HEADING1: 2,
    LineKind.HEADING2: 3,
    LineKind.HEADING3: 4,
    LineKind.LIST: 2,
    LineKind.QUOTE: 2,
}


@dataclass(frozen=True, slots=True)
class Line:
    """A single parsed gemtext line.

    `text` is the canonical display text including the kind's prefix, e.g.
    ``"## Section"`` or ``"=> label (url)"``. `content` is the part after the
    prefix (the label for links).
    """

    kind: LineKind
    text: str
    content: str
    url: str | None = None

    @classmethod
    def of(cls, kind: LineKind, content: str) -> Line:
        """Build a non-link line from its content."""
        return cls(kind=kind, text=_PREFIXES[kind] + content, content=content)

    @classmethod
    def link(cls, url: str, label: str, *, show_url: bool = True) -> Line:
        """Build a link line. The URL is appended to the display text unless hidden."""
        text = f"=> {label} ({url})" if show_url else f"=> {label}"
        return cls(kind=LineKind.LINK, text=text, content=label, url=url)

    @property
    def wrappable(self) -> bool:
        """Preformatted lines are shown verbatim and never reflowed."""
        return self.kind != LineKind.PREFORMATTED

    @property
    def indent_width(self) -> int:
        """Columns reserved at the start of wrapped continuation rows."""
        return _INDENT_WIDTHS[self.kind]

    @property
    def is_heading(self) -> bool:
        return self.kind in HEADING_KINDS
