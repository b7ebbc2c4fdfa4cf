"""Tests for document loading."""

from __future__ import annotations

from io import BytesIO, TextIOWrapper
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from gmir.errors import EmptyDocumentError, ParseError
from gmir.models import LineKind
from gmir.reader import is_pipe, read_file, read_stdin

if TYPE_CHECKING:
    from pathlib import Path


def _fake_stdin(data: bytes) -> TextIOWrapper:
    return TextIOWrapper(BytesIO(data), encoding="utf-8")


class TestReadFile:
    def test_read_sample_file(self, sample_gmi_file: Path) -> None:
        document = read_file(sample_gmi_file)
        assert len(document) == 14
        assert document.title == "Sample capsule"

    def test_hide_urls(self, sample_gmi_file: Path) -> None:
        document = read_file(sample_gmi_file, show_urls=False)
        assert document.links()[0].text == "=> Example"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="could not open"):
            read_file(tmp_path / "missing.gmi")

    def test_empty_file(self, tmp_path: Path) -> None:
        empty_file = tmp_path / "empty.gmi"
        empty_file.write_bytes(b"")
        with pytest.raises(EmptyDocumentError):
            read_file(empty_file)


class TestReadStdin:
    def test_read_stdin(self) -> None:
        with patch("gmir.reader.sys.stdin", _fake_stdin(b"# Piped\n=> /a.gmi A\n")):
            document = read_stdin()
        assert [line.kind for line in document] == [LineKind.HEADING1, LineKind.LINK]

    def test_read_stdin_empty(self) -> None:
        with patch("gmir.reader.sys.stdin", _fake_stdin(b"")), pytest.raises(EmptyDocumentError):
            read_stdin()


class TestIsPipe:
    def test_is_pipe_when_not_tty(self) -> None:
        with patch("gmir.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = False
            assert is_pipe() is True

    def test_is_not_pipe_when_tty(self) -> None:
        with patch("gmir.reader.sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = True
            assert is_pipe() is False
