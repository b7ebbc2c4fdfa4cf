"""Gemtext parser: turns a byte stream into typed lines."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import TYPE_CHECKING

from gmir.errors import EmptyDocumentError, ParseError
from gmir.models import Line, LineKind

if TYPE_CHECKING:
    from typing import BinaryIO

logger = logging.getLogger(__name__)

_PREFORMATTING_TOGGLE = "```"
_TAB_REPLACEMENT = "    "

_LINK_RE = re.compile(r"^=>\s+(\S+)\s+(.+)\s*$")
# Most specific first: "###" also matches the "#" pattern.
_HEADING_RES: tuple[tuple[LineKind, re.Pattern[str]], ...] = (
    (LineKind.HEADING3, re.compile(r"^###\s*(.+)\s*$")),
    (LineKind.HEADING2, re.compile(r"^##\s*(.+)\s*$")),
    (LineKind.HEADING1, re.compile(r"^#\s*(.+)\s*$")),
)
_LIST_RE = re.compile(r"^\*\s+(.+)\s*$")
_QUOTE_RE = re.compile(r"^>\s*(.+)\s*$")


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing carriage return per line.

    A final newline terminates the last line instead of starting an empty one.
    """
    if not text:
        return []
    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()
    return [raw.removesuffix("\r") for raw in raw_lines]


def classify_line(line: str, *, show_urls: bool = True) -> Line:
    """Classify a single non-preformatted line."""
    if m := _LINK_RE.match(line):
        return Line.link(m.group(1), m.group(2), show_url=show_urls)
    for kind, pattern in _HEADING_RES:
        if m := pattern.match(line):
            return Line.of(kind, m.group(1))
    if m := _LIST_RE.match(line):
        return Line.of(LineKind.LIST, m.group(1))
    if m := _QUOTE_RE.match(line):
        return Line.of(LineKind.QUOTE, m.group(1))
    return Line.of(LineKind.TEXT, line.strip())


def parse_text(text: str, *, show_urls: bool = True) -> list[Line]:
    """Parse already decoded gemtext. The text is normalized to NFC first."""
    preformatted = False
    out: list[Line] = []
    for raw in split_lines(unicodedata.normalize("NFC", text)):
        line = raw.replace("\t", _TAB_REPLACEMENT)
        if line.startswith(_PREFORMATTING_TOGGLE):
            preformatted = not preformatted
            continue
        if preformatted:
            out.append(Line.of(LineKind.PREFORMATTED, line))
            continue
        out.append(classify_line(line, show_urls=show_urls))
    return out


def parse(stream: BinaryIO | bytes, *, show_urls: bool = True) -> list[Line]:
    """Parse gemtext from a binary stream or a bytes object.

    Raises EmptyDocumentError if no lines result and ParseError if reading
    the stream fails.
    """
    if isinstance(stream, bytes):
        data = stream
    else:
        try:
            data = stream.read()
        except OSError as e:
            msg = f"could not read input: {e}"
            raise ParseError(msg) from e
    lines = parse_text(data.decode("utf-8", errors="replace"), show_urls=show_urls)
    if not lines:
        raise EmptyDocumentError
    logger.debug("parsed %d lines from %d bytes", len(lines), len(data))
    return lines
