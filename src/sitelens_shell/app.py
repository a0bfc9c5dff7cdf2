from __future__ import annotations

import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from sitelens_shell.core.command_registry import CommandRegistry, QUIT_CODE, register_all_commands
from sitelens_shell.core.context.shell_context import ShellContext
from sitelens_shell.core.core import execute_command, execute_line
from sitelens_shell.core.managers.config_manager import config_manager
from sitelens_shell.core.utils.configure_logging import configure_logger
from sitelens_shell.core.utils.path_utils import PathUtils

# Initialize logging based on configuration
configure_logger(
    config_manager.get_nested("debug.level"),
    config_manager.get_nested("debug.module_levels"),
    config_manager.get_nested("debug.silenced_loggers"),
)
logger = logging.getLogger(__name__)


def start_shell() -> None:
    """Starts the interactive REPL (Read-Eval-Print Loop) for the SiteLens shell."""
    register_all_commands()
    ctx = ShellContext()

    print("Welcome to SiteLens Shell 1.0 (type 'help' for commands)")

    history_path = PathUtils.get_shell_history_file()
    history = FileHistory(str(history_path))
    completer = WordCompleter(sorted(CommandRegistry), ignore_case=True)

    session = PromptSession(
        history=history,
        completer=completer,
        complete_while_typing=True
    )
    logger.info("Shell startup; history file at: %s", history_path)

    try:
        while True:
            try:
                line = session.prompt("SiteLens>> ").strip()
            except (EOFError, KeyboardInterrupt):
                break

            if not line:
                continue

            if execute_line(line, ctx) == QUIT_CODE:
                break
    finally:
        print("Bye!")


def main(argv: list[str] | None = None) -> int:
    """
    Entrypoint for running the shell from the command line.
    With arguments, runs them as a single command (e.g. `sitelens analyze page.html`)
    and exits with its code; without, starts the interactive shell.
    """
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        register_all_commands()
        code = execute_command(list(argv), ShellContext())
        return 0 if code == QUIT_CODE else code

    start_shell()
    return 0


if __name__ == "__main__":
    sys.exit(main())
