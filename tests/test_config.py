"""Tests for configuration loading."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gmir.config import get_config_dir, load_config
from gmir.models import AppConfig

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


class TestConfigDir:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMIR_CONFIG_DIR", str(tmp_path))
        assert get_config_dir() == tmp_path

    def test_default_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GMIR_CONFIG_DIR", raising=False)
        assert get_config_dir().name == "gmir"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMIR_CONFIG_DIR", str(tmp_path))
        assert load_config() == AppConfig()

    def test_values_from_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMIR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text('max_text_width = 60\nshow_urls = false\ntheme = "nord"\n')
        config = load_config()
        assert config.max_text_width == 60
        assert config.show_urls is False
        assert config.theme == "nord"

    def test_invalid_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("GMIR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text("max_text_width = [")
        with caplog.at_level(logging.WARNING, logger="gmir.config"):
            assert load_config() == AppConfig()
        assert "Ignoring invalid config" in caplog.text

    def test_invalid_value(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GMIR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.toml").write_text("max_text_width = 0\n")
        assert load_config() == AppConfig()
