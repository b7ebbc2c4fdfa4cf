"""XDG directory management and configuration for gmir."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from gmir.models import AppConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the gmir config directory.

    Respects GMIR_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("GMIR_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("gmir"))


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found or invalid."""
    path = get_config_dir() / "config.toml"
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        return AppConfig(**data)
    except (OSError, tomllib.TOMLDecodeError, ValidationError, TypeError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return AppConfig()
