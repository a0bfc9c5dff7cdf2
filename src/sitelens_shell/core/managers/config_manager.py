# src/sitelens_shell/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from sitelens_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

TRUTHY = ("1", "true", "yes", "on")


def _load_settings(config_path: Path) -> Dict[str, Any]:
    """Reads settings.json; any problem results in an empty config."""
    if not config_path.exists():
        logger.warning("settings.json not found at %s. Using empty config.", config_path)
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load settings.json: %s", e, exc_info=True)
        return {}
    if not isinstance(data, dict):
        logger.error("settings.json must contain a JSON object, got %s.", type(data).__name__)
        return {}
    return data


def _cast_like(current: Any, value: Any) -> Any:
    """
    Casts `value` to the type of `current`.
    Raises ValueError/TypeError when that is not possible.
    """
    if current is None or isinstance(current, dict):
        return value
    if isinstance(current, bool):
        return str(value).strip().lower() in TRUTHY
    return type(current)(value)


class ConfigManager:
    """
    Singleton holding the shell configuration.

    Values come from the packaged settings.json; `set_nested` only changes the
    in-memory copy for the running session and `reset` discards those changes.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
            logger.debug("ConfigManager initialized.")
        return cls._instance

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """Dotted lookup, e.g. 'loader.timeout'. Missing keys yield `default`."""
        node: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Stores `value` under a dotted key, creating intermediate sections.
        An existing scalar keeps its type when the new value can be cast to it.
        """
        *sections, leaf = key_path.split('.')
        target = self._config
        for key in sections:
            target = target.setdefault(key, {})
            if not isinstance(target, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        current = target.get(leaf)
        try:
            value = _cast_like(current, value)
        except (ValueError, TypeError):
            logger.warning(
                "Could not cast new value for '%s' to type %s. Storing as string.",
                key_path, type(current).__name__
            )

        target[leaf] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self) -> None:
        """Reloads the configuration from settings.json, dropping session changes."""
        self._config = _load_settings(PathUtils.get_settings_file())
        logger.debug("Configuration has been (re)loaded from settings.json.")


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
