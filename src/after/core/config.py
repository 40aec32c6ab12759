"""Configuration loading and management."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from after.core.exceptions import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_NAME = "after.toml"

DEFAULTS: dict[str, Any] = {
    "format": "iso",
    "utc": False,
}


@dataclass
class AfterConfig:
    """Loaded configuration."""

    defaults: dict[str, Any] = field(default_factory=dict)

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    @property
    def output_format(self) -> str:
        """How timestamps are printed: ``iso``, ``timestamp`` or a strftime pattern."""
        value = self.defaults.get("format", DEFAULTS["format"])
        if not isinstance(value, str) or not value:
            raise ConfigError(f"defaults.format must be a non-empty string, got {value!r}")
        return value

    @property
    def utc(self) -> bool:
        value = self.defaults.get("utc", DEFAULTS["utc"])
        if not isinstance(value, bool):
            raise ConfigError(f"defaults.utc must be true or false, got {value!r}")
        return value


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. ./after.toml (current directory)
    2. ./pyproject.toml [tool.after] section
    3. Git repository root after.toml
    4. ~/.config/after/config.toml
    """
    cwd = Path.cwd()
    if (cwd / CONFIG_NAME).exists():
        return cwd / CONFIG_NAME

    if (cwd / "pyproject.toml").exists():
        try:
            with open(cwd / "pyproject.toml", "rb") as f:
                pyproject = tomllib.load(f)
            if "tool" in pyproject and "after" in pyproject["tool"]:
                return cwd / "pyproject.toml"
        except tomllib.TOMLDecodeError as e:
            logger.debug(f"Ignoring unreadable {cwd / 'pyproject.toml'}: {e}")

    git_root = _find_git_root(cwd)
    if git_root and (git_root / CONFIG_NAME).exists():
        return git_root / CONFIG_NAME

    user_config = user_config_path()
    if user_config.exists():
        return user_config

    return None


def user_config_path() -> Path:
    return Path.home() / ".config" / "after" / "config.toml"


def _find_git_root(start: Path) -> Path | None:
    """Find git repository root."""
    current = start.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return None


def load_config(path: Path | str | None = None) -> AfterConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigNotFoundError: If an explicit *path* does not exist.
        ConfigError: If the file is not valid TOML.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No configuration file found, using defaults")
        return AfterConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    # Handle pyproject.toml
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("after", {})

    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        raise ConfigError(f"[defaults] in {path} must be a table")

    config = AfterConfig(defaults=defaults)
    config._source_path = path
    logger.debug(f"Loaded configuration from {path}")

    return config
