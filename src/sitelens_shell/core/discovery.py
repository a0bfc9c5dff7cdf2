# src/sitelens_shell/core/discovery.py
import importlib
import logging
from typing import Any, Dict, Tuple

from sitelens_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

HANDLERS_MODULE = "sitelens_shell.core.handlers"


def discover_handlers() -> Tuple[Dict[str, Any], Dict[str, str]]:
    """
    Imports every *_handler.py module of the handlers package and returns:
    1. A map of command names to their handler function (`handle_<name>`).
    2. A map of command names to their help text (`<name>_help_text`).
    """
    discovered_handlers: Dict[str, Any] = {}
    discovered_help_texts: Dict[str, str] = {}

    handlers_dir = PathUtils.get_shell_package_root() / "core" / "handlers"
    logger.debug("Scanning for handlers in: '%s'", handlers_dir)

    for file_path in sorted(handlers_dir.glob("*_handler.py")):
        module_name = f"{HANDLERS_MODULE}.{file_path.stem}"
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.error("Failed to load handler module %s: %s", file_path.name, e, exc_info=True)
            continue

        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if attr_name.startswith("handle_") and callable(attr):
                command_name = attr_name[len("handle_"):]
                discovered_handlers[command_name] = attr
                logger.debug("Discovered command '%s'", command_name)
            elif attr_name.endswith("_help_text") and isinstance(attr, str):
                discovered_help_texts[attr_name[:-len("_help_text")]] = attr

    return discovered_handlers, discovered_help_texts
