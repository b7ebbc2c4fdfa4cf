"""Document loading from files and standard input."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from gmir.document import Document, load_document
from gmir.errors import ParseError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def read_file(path: Path, *, show_urls: bool = True) -> Document:
    """Load a document from a file. Raises ParseError if it cannot be read or is empty."""
    try:
        with path.open("rb") as f:
            document = load_document(f, show_urls=show_urls)
    except OSError as e:
        msg = f"could not open {path}: {e}"
        raise ParseError(msg) from e
    logger.debug("loaded %s: %d lines", path, len(document))
    return document


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_stdin(*, show_urls: bool = True) -> Document:
    """Load a document from standard input."""
    document = load_document(sys.stdin.buffer, show_urls=show_urls)
    logger.debug("loaded stdin: %d lines", len(document))
    return document
