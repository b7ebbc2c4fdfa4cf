"""Read command - view a gemtext document in a TUI."""

from __future__ import annotations

import os
import sys
from pathlib import Path  # noqa: TC003 - typer needs this at runtime for argument parsing
from typing import TYPE_CHECKING, Annotated

import typer

from gmir.config import load_config
from gmir.errors import ParseError
from gmir.reader import is_pipe, read_file, read_stdin

if TYPE_CHECKING:
    from gmir.document import Document


def _setup_tty_input() -> None:
    """Redirect fd 0 to /dev/tty so Textual can read the keyboard after stdin was consumed."""
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, sys.stdin.fileno())
    os.close(tty_fd)
    sys.stdin = os.fdopen(0)


def _load(file: Path | None, *, show_urls: bool) -> tuple[Document, str]:
    if file is not None:
        return read_file(file, show_urls=show_urls), file.name
    document = read_stdin(show_urls=show_urls)
    try:
        _setup_tty_input()
    except OSError as e:
        typer.echo(f"Error: no terminal for keyboard input: {e}")
        raise typer.Exit(1)  # noqa: B904
    return document, "stdin"


def read(
    file: Annotated[Path | None, typer.Argument(help="Gemtext file to view (default: piped stdin)")] = None,
    hide_urls: Annotated[bool, typer.Option("--hide-urls", help="Do not show link URLs next to their labels")] = False,  # noqa: FBT002
    max_width: Annotated[
        int | None, typer.Option("--max-width", "-w", min=1, help="Maximum text width in columns")
    ] = None,
) -> None:
    """View a gemtext document with reflowed text. Prints the URL of a selected link."""
    if file is not None and not file.is_file():
        typer.echo(f"Error: {file} is not a file")
        raise typer.Exit(1)

    if file is None and not is_pipe():
        typer.echo("Error: provide a file or pipe input")
        raise typer.Exit(1)

    config = load_config()
    if max_width is not None:
        config = config.model_copy(update={"max_text_width": max_width})
    show_urls = config.show_urls and not hide_urls

    try:
        document, source = _load(file, show_urls=show_urls)
    except ParseError as e:
        typer.echo(f"Could not parse input: {e}")
        raise typer.Exit(1)  # noqa: B904

    from gmir.app import GmirApp  # noqa: PLC0415

    reader_app = GmirApp(document, source=source, config=config)
    url = reader_app.run(mouse=False)
    if url:
        typer.echo(url)
