# src/sitelens_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths ---

    @staticmethod
    def get_shell_package_root() -> Path:
        """Directory of the sitelens_shell package (holds settings.json)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_shell_history_file() -> Path:
        """
        Returns the path to the shell history file in the user's home directory.
        (e.g., ~/.sitelens_shell_history)
        """
        return Path.home() / ".sitelens_shell_history"

    @staticmethod
    def get_user_documents_dir() -> Path:
        """
        Returns the absolute path to the current user's Documents directory.
        """
        return Path.home() / "Documents"

    # --- Helper methods ---

    @staticmethod
    def resolve_output_path(path: str, base_dir: Path) -> Path:
        """
        Absolute paths are used as given; relative ones are placed under `base_dir`.
        The parent directory is created when missing.
        """
        target = Path(path).expanduser()
        if not target.is_absolute():
            target = base_dir.expanduser() / target
        target.parent.mkdir(parents=True, exist_ok=True)
        return target
