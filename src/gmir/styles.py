"""Display styles per line kind."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from rich.style import Style

from gmir.models import LineKind

if TYPE_CHECKING:
    from collections.abc import Mapping

_DEFAULT_LINE_STYLES: Mapping[LineKind, Style] = MappingProxyType({
    LineKind.TEXT: Style(),
    LineKind.LINK: Style(color="blue"),
    LineKind.PREFORMATTED: Style(),
    LineKind.HEADING1: Style(bold=True),
    LineKind.HEADING2: Style(bold=True),
    LineKind.HEADING3: Style(bold=True),
    LineKind.LIST: Style(),
    LineKind.QUOTE: Style(italic=True),
})


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Immutable mapping from line kind to its Rich style, plus the few UI styles around it."""

    lines: Mapping[LineKind, Style] = field(default_factory=lambda: _DEFAULT_LINE_STYLES)
    selector: Style = field(default_factory=Style)
    highlight: Style = field(default_factory=lambda: Style(reverse=True))
    bar: Style = field(default_factory=lambda: Style(reverse=True))

    def for_kind(self, kind: LineKind) -> Style:
        """Style for lines of the given kind."""
        return self.lines[kind]

    def highlighted(self, kind: LineKind) -> Style:
        """Style for search matches within lines of the given kind."""
        return self.lines[kind] + self.highlight


DEFAULT_STYLES = StyleConfig()
