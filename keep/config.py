"""Settings for Keep: YAML config file plus environment overrides.

Lookup order for each key: environment variable, config.yaml, default.
The config file itself is $KEEP_CONFIG or ~/.config/keep/config.yaml.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from keep.fileio import read_yaml

ENV_PREFIX = "KEEP"

DEFAULT_OVERDUE_LIMIT = 10
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def config_path() -> Path:
    return _env_path(_k("CONFIG"), Path.home() / ".config" / "keep" / "config.yaml")


@dataclass
class Settings:
    data_file: Path
    overdue_limit: int = DEFAULT_OVERDUE_LIMIT
    log_dir: Path = Path.home() / ".local" / "state" / "keep"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        """Build settings from a parsed config mapping; bad values fall back to defaults."""
        settings = cls(data_file=Path.home() / ".keep_tasks.json")
        if d.get("data_file"):
            settings.data_file = Path(str(d["data_file"])).expanduser()
        if d.get("log_dir"):
            settings.log_dir = Path(str(d["log_dir"])).expanduser()

        limit = d.get("overdue_limit")
        if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
            settings.overdue_limit = limit

        level = str(d.get("log_level", "")).strip().upper()
        if level in VALID_LOG_LEVELS:
            settings.log_level = level
        return settings


def load_settings(path: Path | None = None) -> Settings:
    """Load settings; a missing or broken config file yields defaults."""
    if path is None:
        path = config_path()
    try:
        data = read_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        data = {}

    settings = Settings.from_dict(data)
    settings.data_file = _env_path(_k("DATA_FILE"), settings.data_file)
    settings.log_dir = _env_path(_k("LOG_DIR"), settings.log_dir)
    level = os.getenv(_k("LOG_LEVEL"), "").strip().upper()
    if level in VALID_LOG_LEVELS:
        settings.log_level = level
    return settings


def data_path(settings: Settings | None = None) -> Path:
    """Resolve the JSON data file path."""
    if settings is None:
        settings = load_settings()
    return settings.data_file.expanduser().resolve()
