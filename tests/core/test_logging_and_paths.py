# tests/core/test_logging_and_paths.py
import logging

import pytest

from sitelens_shell.core.utils.configure_logging import LogWithTqdm, configure_logger
from sitelens_shell.core.utils.path_utils import PathUtils


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    named = {name: logging.getLogger(name).level for name in ("inspector", "urllib3")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, old_level in named.items():
        logging.getLogger(name).setLevel(old_level)


def test_configure_logger_levels(restore_logging):
    configure_logger("debug", {"inspector": "WARNING"}, {"urllib3": "ERROR"})

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], LogWithTqdm)
    assert logging.getLogger("inspector").level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.ERROR


def test_configure_logger_unknown_level_falls_back(restore_logging):
    configure_logger("LOUD")
    assert logging.getLogger().level == logging.INFO


def test_settings_file_lives_in_shell_package():
    settings = PathUtils.get_settings_file()
    assert settings.name == "settings.json"
    assert settings.parent.name == "sitelens_shell"
    assert settings.exists()


def test_resolve_output_path(tmp_path):
    relative = PathUtils.resolve_output_path("exports/out.json", tmp_path)
    assert relative == tmp_path / "exports" / "out.json"
    assert relative.parent.is_dir()

    absolute_target = tmp_path / "elsewhere" / "out.csv"
    assert PathUtils.resolve_output_path(str(absolute_target), tmp_path / "ignored") == absolute_target
