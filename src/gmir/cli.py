"""CLI entry point for gmir."""

from __future__ import annotations

import typer

from gmir.commands.read import read

app = typer.Typer(add_completion=False)
app.command()(read)


def main() -> None:
    """Entry point for the CLI."""
    app()
