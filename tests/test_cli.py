"""Tests for the command line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from gmir.cli import app
from gmir.models import AppConfig

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

runner = CliRunner()


@pytest.fixture(autouse=True)
def default_config() -> Iterator[None]:
    with patch("gmir.commands.read.load_config", return_value=AppConfig()):
        yield


class TestReadCommand:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "missing.gmi")])
        assert result.exit_code == 1
        assert "is not a file" in result.output

    def test_empty_file(self, tmp_path: Path) -> None:
        empty_file = tmp_path / "empty.gmi"
        empty_file.write_bytes(b"")
        result = runner.invoke(app, [str(empty_file)])
        assert result.exit_code == 1
        assert "Could not parse input: given GMI is empty" in result.output

    def test_no_input(self) -> None:
        with patch("gmir.commands.read.is_pipe", return_value=False):
            result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "provide a file or pipe input" in result.output

    def test_prints_selected_url(self, sample_gmi_file: Path) -> None:
        with patch("gmir.app.GmirApp.run", return_value="/about.gmi") as mock_run:
            result = runner.invoke(app, [str(sample_gmi_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "/about.gmi"
        mock_run.assert_called_once_with(mouse=False)

    def test_quit_prints_nothing(self, sample_gmi_file: Path) -> None:
        with patch("gmir.app.GmirApp.run", return_value=None):
            result = runner.invoke(app, [str(sample_gmi_file)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_options_reach_app(self, sample_gmi_file: Path) -> None:
        with patch("gmir.app.GmirApp") as mock_app:
            mock_app.return_value.run.return_value = None
            result = runner.invoke(app, [str(sample_gmi_file), "--hide-urls", "--max-width", "40"])
        assert result.exit_code == 0
        document = mock_app.call_args.args[0]
        config = mock_app.call_args.kwargs["config"]
        assert document.links()[0].text == "=> Example"
        assert config.max_text_width == 40

    def test_invalid_max_width(self, sample_gmi_file: Path) -> None:
        result = runner.invoke(app, [str(sample_gmi_file), "--max-width", "0"])
        assert result.exit_code != 0

    def test_piped_input(self) -> None:
        with (
            patch("gmir.commands.read.is_pipe", return_value=True),
            patch("gmir.commands.read._setup_tty_input"),
            patch("gmir.app.GmirApp") as mock_app,
        ):
            mock_app.return_value.run.return_value = "/a.gmi"
            result = runner.invoke(app, [], input="# Piped\n=> /a.gmi A\n")
        assert result.exit_code == 0
        assert "/a.gmi" in result.output
        assert mock_app.call_args.kwargs["source"] == "stdin"
