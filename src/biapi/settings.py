"""
Persistent key/value settings for the CLI.

Settings live in a single JSON object on disk. Defaults are computed
from ``BIAPI_*`` environment variables when a store is opened: keys
absent from the file are filled from them, keys present in the file
always win.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from biapi import __app_name__
from biapi.errors import ConfigurationError
from biapi.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://demo.biapi.pro/2.0"
CONFIG_FILENAME = "config.json"

# setting key -> (environment variable, fallback)
SETTING_SOURCES = {
    "accessToken": ("BIAPI_ACCESS_TOKEN", ""),
    "baseUrl": ("BIAPI_BASE_URL", DEFAULT_BASE_URL),
    "domain": ("BIAPI_DOMAIN", ""),
    "clientId": ("BIAPI_CLIENT_ID", ""),
    "clientSecret": ("BIAPI_CLIENT_SECRET", ""),
}


def default_settings() -> Dict[str, str]:
    """Compute defaults from the current environment."""
    return {
        key: os.getenv(env_var) or fallback
        for key, (env_var, fallback) in SETTING_SOURCES.items()
    }


def get_config_dir() -> Path:
    """Directory holding the settings file."""
    override = os.getenv("BIAPI_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path(typer.get_app_dir(__app_name__))


class SettingsStore:
    """JSON-file backed settings, written through on every mutation."""

    def __init__(self, path: Optional[Path] = None, defaults: Optional[Dict[str, Any]] = None):
        self.path = Path(path) if path else get_config_dir() / CONFIG_FILENAME
        self._defaults = dict(defaults) if defaults is not None else default_settings()
        self._data = {**self._defaults, **self._read()}
        self._write()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Unable to read settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {self.path} must contain a JSON object")
        return data

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Unable to write settings file {self.path}: {e}") from e
        logger.debug(f"Saved settings to {self.path}")

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._write()

    def get_all(self) -> Dict[str, Any]:
        """Return a copy of every stored setting."""
        return dict(self._data)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
        self._write()

    def clear(self) -> None:
        """Reset the store to the defaults captured when it was opened."""
        self._data = dict(self._defaults)
        self._write()


# Global store instance
_store: Optional[SettingsStore] = None


def get_store() -> SettingsStore:
    """Get or open the process-wide settings store."""
    global _store
    if _store is None:
        _store = SettingsStore()
    return _store


def set_store(store: Optional[SettingsStore]) -> None:
    """Replace the process-wide settings store."""
    global _store
    _store = store
