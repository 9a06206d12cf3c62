"""Process-wide configuration loaded once from a JSON file."""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass

from patternlab.utils import read_file

CONFIG_PATH = "static/config.json"
VERSION_PREFIX = "version"
DATABASE_PREFIX = "database"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


@dataclass(frozen=True)
class ConfigEntry:
    """One named configuration value."""

    prefix: str
    value: str

    def __str__(self) -> str:
        return f"{self.prefix} : {self.value}"


@dataclass(frozen=True)
class ConfigManager:
    """The application settings: version and database connection string."""

    version: ConfigEntry
    database: ConfigEntry

    def describe(self) -> str:
        """Return one ``prefix : value`` line per setting."""
        return f"{self.version}\n{self.database}\n"


def _entry(root: dict, prefix: str) -> ConfigEntry:
    value = root.get(prefix)
    if not isinstance(value, str):
        raise ConfigError(f"Missing value for {prefix}.")
    return ConfigEntry(prefix, value)


def load_config(path: str | os.PathLike[str] = CONFIG_PATH) -> ConfigManager:
    """Read and validate the configuration stored at ``path``."""
    try:
        text = read_file(path)
    except OSError as exc:
        raise ConfigError("File error.") from exc

    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError("root : INVALID JSON") from exc
    if not isinstance(root, dict):
        raise ConfigError("root : INVALID JSON")

    manager = ConfigManager(
        version=_entry(root, VERSION_PREFIX),
        database=_entry(root, DATABASE_PREFIX),
    )
    logger.info("Config is set.")
    return manager


_lock = threading.Lock()
_instance: ConfigManager | None = None


def get_instance(path: str | os.PathLike[str] | None = None) -> ConfigManager:
    """Return the shared configuration, loading it on first use.

    Only the first successful call reads the file; later calls return the
    same object regardless of ``path``.
    """
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = load_config(CONFIG_PATH if path is None else path)
    return _instance


def reset_instance() -> None:
    """Drop the shared configuration so the next call loads it again."""
    global _instance
    with _lock:
        _instance = None