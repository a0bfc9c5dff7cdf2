# src/sitelens_shell/core/handlers/quit_handler.py
from typing import List, Optional

from sitelens_shell.core.command_registry import QUIT_CODE
from sitelens_shell.core.context.shell_context import ShellContext


def handle_quit(_args: List[str], _ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    """Signals the shell to stop."""
    return QUIT_CODE


handle_exit = handle_quit
