# src/sitelens_shell/core/handlers/config_handler.py
import json
import logging
from typing import List, Optional

from sitelens_shell.core.context.shell_context import ShellContext
from sitelens_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

config_help_text = """
  config list                Show the current configuration as JSON.
  config get <key>           Show one value (e.g., shell.tree_depth).
  config set <key> <value>   Change a value for this session (e.g., loader.timeout 30).
  config reset               Reload the configuration from settings.json.
""".strip()

_MISSING = object()


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _config_get(args: List[str]) -> int:
    if len(args) != 1:
        print("Usage: config get <key>")
        return 1
    value = config_manager.get_nested(args[0], _MISSING)
    if value is _MISSING:
        print(f"❌ Unknown config key '{args[0]}'.")
        return 1
    print(json.dumps(value, indent=2) if isinstance(value, dict) else value)
    return 0


def _config_set(args: List[str]) -> int:
    if len(args) < 2:
        print("Usage: config set <key> <value>")
        return 1
    key_path, value = args[0], _unquote(" ".join(args[1:]))

    if not config_manager.set_nested(key_path, value):
        print(f"❌ Error: Failed to set config value for key '{key_path}'.")
        return 1
    stored = config_manager.get_nested(key_path)
    print(f"✅ Config updated: {key_path} = {stored} (type: {type(stored).__name__})")
    return 0


def handle_config(args: List[str], ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Views or changes the session configuration."""
    if not args:
        print(config_help_text)
        return 1

    subcommand, rest = args[0], args[1:]
    if subcommand == "list":
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0
    if subcommand == "get":
        return _config_get(rest)
    if subcommand == "set":
        return _config_set(rest)
    if subcommand == "reset":
        config_manager.reset()
        print("✅ Configuration has been reset to the values from settings.json.")
        return 0

    print(f"Unknown command: 'config {subcommand}'.")
    return 1
