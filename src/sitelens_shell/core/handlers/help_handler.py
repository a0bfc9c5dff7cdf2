# src/sitelens_shell/core/handlers/help_handler.py
from typing import List, Optional

from sitelens_shell.core.command_registry import COMMAND_HELP_TEXTS
from sitelens_shell.core.context.shell_context import ShellContext


def get_help_text() -> str:
    lines = ["Available commands:"]
    for name in sorted(COMMAND_HELP_TEXTS):
        lines.append(COMMAND_HELP_TEXTS[name])
    lines.append("  help                Show this overview.")
    lines.append("  quit                Leave the shell.")
    return "\n".join(lines)


def handle_help(_args: List[str], _ctx: ShellContext, _stdin: Optional[str] = None) -> int:
    print(get_help_text())
    return 0
