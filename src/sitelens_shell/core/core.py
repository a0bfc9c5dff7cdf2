# src/sitelens_shell/core/core.py
import logging
import shlex
from typing import List, Optional

from sitelens_shell.core.command_registry import CommandRegistry
from sitelens_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_CODE = 127


def parse_command_line(line: str) -> List[str]:
    """Splits a shell line into tokens; returns [] on unbalanced quotes."""
    try:
        return shlex.split(line)
    except ValueError as e:
        print(f"❌ Parse error: {e}")
        return []


def execute_command(tokens: List[str], ctx: ShellContext, stdin: Optional[str] = None) -> int:
    """Looks up and runs a single registered command."""
    if not tokens:
        return 0
    name, args = tokens[0], tokens[1:]
    handler = CommandRegistry.get(name)
    if handler is None:
        print(f"command not found: {name}")
        return UNKNOWN_COMMAND_CODE

    try:
        return int(handler(args, ctx, stdin))
    except Exception as e:
        logger.error("Command '%s' failed: %s", name, e, exc_info=True)
        print(f"❌ Error: {e}")
        return 1


def execute_line(line: str, ctx: ShellContext) -> int:
    return execute_command(parse_command_line(line), ctx)
