"""Immutable gemtext document and its derived index spaces."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from gmir.errors import EmptyDocumentError
from gmir.models import Line, LineKind, SelectorSpace
from gmir.parser import parse
from gmir.wrap import display_width

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import BinaryIO


class Document:
    """An ordered, non-empty sequence of lines that never changes after creation."""

    def __init__(self, lines: Sequence[Line]) -> None:
        if not lines:
            raise EmptyDocumentError
        self._lines: tuple[Line, ...] = tuple(lines)

    @property
    def lines(self) -> tuple[Line, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    @cached_property
    def link_indices(self) -> list[int]:
        """Line indices of all links, in document order."""
        return [i for i, line in enumerate(self._lines) if line.kind == LineKind.LINK]

    @cached_property
    def heading_indices(self) -> list[int]:
        """Line indices of all headings of any level, in document order."""
        return [i for i, line in enumerate(self._lines) if line.is_heading]

    def links(self) -> list[Line]:
        return [self._lines[i] for i in self.link_indices]

    def headings(self) -> list[Line]:
        return [self._lines[i] for i in self.heading_indices]

    def selectable_indices(self, space: SelectorSpace) -> list[int]:
        """Line indices a selector in the given space can pick from."""
        if space == SelectorSpace.LINKS:
            return self.link_indices
        return self.heading_indices

    def ordinals(self, space: SelectorSpace) -> dict[int, int]:
        """Map of line index to its 0-based position in the selector space."""
        return {line_index: n for n, line_index in enumerate(self.selectable_indices(space))}

    @cached_property
    def preformatted_width(self) -> int:
        """Display width of the widest preformatted line, 0 if there is none."""
        return max(
            (display_width(line.text) for line in self._lines if line.kind == LineKind.PREFORMATTED),
            default=0,
        )

    @property
    def title(self) -> str:
        """Text of the first level-1 heading, else of the first heading, else empty."""
        headings = self.headings()
        for line in headings:
            if line.kind == LineKind.HEADING1:
                return line.content.strip()
        return headings[0].content.strip() if headings else ""

    def heading_projection(self) -> Document | None:
        """A document made of the heading lines only (table of contents), None without headings."""
        headings = self.headings()
        if not headings:
            return None
        return Document(headings)


def load_document(stream: BinaryIO | bytes, *, show_urls: bool = True) -> Document:
    """Parse a gemtext byte stream into a Document. Raises ParseError on failure."""
    return Document(parse(stream, show_urls=show_urls))
