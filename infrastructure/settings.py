"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

SETTINGS_ENV = "TRASHRM_SETTINGS"
TRASH_DIR_ENV = "TRASHRM_TRASH_DIR"

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "trashrm" / "settings.json"
DEFAULT_TRASH_DIR = Path.home() / ".Trash"
DEFAULT_LOG_DIR = Path.home() / ".local" / "state" / "trashrm" / "logs"


class JsonSettings:
    """JSON settings with dotted-key access (`trash.directory`, `logging.level`).

    With `required=False` a missing file reads as empty settings, so every
    `get` falls back to its default.
    """

    def __init__(self, settings_path: str | Path, required: bool = True) -> None:
        self.path = Path(settings_path)
        self._data: dict[str, Any] = {}
        if self.path.exists():
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"settings root must be an object: {self.path}")
            self._data = data
        elif required:
            raise FileNotFoundError(f"settings file not found: {self.path}")

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if any part is missing."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node


@dataclass(frozen=True)
class AppConfig:
    """Resolved configuration for one invocation.

    Attributes:
        trash_dir: Directory receiving the trashed copies.
        log_dir: Directory for the rotating log files.
        log_level: Minimum loguru level written to the log file.
        logging_enabled: Whether a log file is written at all.
    """

    trash_dir: Path = DEFAULT_TRASH_DIR
    log_dir: Path = DEFAULT_LOG_DIR
    log_level: str = "INFO"
    logging_enabled: bool = True


def settings_path_from_env(env: Mapping[str, str]) -> Path:
    raw = env.get(SETTINGS_ENV)
    return Path(raw).expanduser() if raw else DEFAULT_SETTINGS_PATH


def load_config(
    settings_path: str | Path | None = None, env: Mapping[str, str] | None = None
) -> AppConfig:
    """Build the configuration from the settings file and environment.

    A missing settings file means defaults. An unreadable or invalid one is
    logged and ignored. `$TRASHRM_TRASH_DIR` overrides `trash.directory`.
    """
    if env is None:
        env = os.environ
    path = Path(settings_path) if settings_path is not None else settings_path_from_env(env)

    settings: JsonSettings | None = None
    try:
        settings = JsonSettings(path, required=False)
    except (OSError, ValueError) as ex:
        logger.error("Ignoring settings file {}: {}", path, ex)

    def _get(key: str, default: Any) -> Any:
        return settings.get(key, default) if settings is not None else default

    trash_dir = env.get(TRASH_DIR_ENV) or _get("trash.directory", None)
    log_dir = _get("logging.directory", None)
    return AppConfig(
        trash_dir=Path(trash_dir).expanduser() if trash_dir else DEFAULT_TRASH_DIR,
        log_dir=Path(log_dir).expanduser() if log_dir else DEFAULT_LOG_DIR,
        log_level=str(_get("logging.level", "INFO")).upper(),
        logging_enabled=bool(_get("logging.enabled", True)),
    )
