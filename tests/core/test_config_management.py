# tests/core/test_config_management.py
import json

import pytest

from sitelens_shell.core.managers.config_manager import ConfigManager
from sitelens_shell.core.handlers.config_handler import handle_config
from sitelens_shell.core.context.shell_context import ShellContext
from sitelens_shell.core.utils.path_utils import PathUtils

# A small, predictable configuration for the tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "loader": {
        "timeout": 15,
        "chrome_version": "120.0.0.0"
    },
    "analysis": {
        "max_workers": 4
    },
    "shell": {
        "verbose": False
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Sets up an isolated environment for the ConfigManager:
    - Creates a temporary package root with a fake 'settings.json'.
    - Monkeypatches PathUtils to point to that location.
    The singleton is reloaded from the real settings afterwards.
    """
    package_root = tmp_path / "sitelens_shell"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: package_root)

    # ConfigManager is a singleton that may already be loaded; force a reload.
    config_manager_instance = ConfigManager()
    config_manager_instance.reset()

    yield config_manager_instance, ShellContext()

    monkeypatch.undo()
    config_manager_instance.reset()


# --- ConfigManager ---

def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    manager, _ = config_env
    config = manager.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["analysis"]["max_workers"] == 4


def test_config_manager_get_nested(config_env):
    manager, _ = config_env
    assert manager.get_nested("loader.timeout") == 15
    assert manager.get_nested("non.existent.key", "default") == "default"
    assert manager.get_nested("loader.timeout.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    manager, _ = config_env

    manager.set_nested("debug.level", "INFO")
    assert manager.get_nested("debug.level") == "INFO"

    # New keys are stored as given.
    manager.set_nested("export.output_dir", "/tmp/out")
    assert manager.get_nested("export.output_dir") == "/tmp/out"

    # The original value is an int, so the string '8' is cast to int.
    manager.set_nested("analysis.max_workers", "8")
    assert manager.get_nested("analysis.max_workers") == 8
    assert isinstance(manager.get_nested("analysis.max_workers"), int)

    manager.set_nested("shell.verbose", "true")
    assert manager.get_nested("shell.verbose") is True


def test_config_manager_uncastable_value_kept_as_string(config_env):
    manager, _ = config_env
    assert manager.set_nested("loader.timeout", "soon")
    assert manager.get_nested("loader.timeout") == "soon"


def test_config_manager_reset(config_env):
    manager, _ = config_env

    manager.set_nested("debug.level", "DEBUG")
    assert manager.get_nested("debug.level") == "DEBUG"

    manager.reset()
    assert manager.get_nested("debug.level") == "WARNING"


def test_config_manager_missing_settings_file(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: tmp_path)
    manager = ConfigManager()
    manager.reset()
    assert manager.get_all() == {}

    monkeypatch.undo()
    manager.reset()


# --- 'config' command handler ---

def test_handle_config_list(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["list"], ctx) == 0
    captured = capsys.readouterr()

    output_json = json.loads(captured.out)
    assert output_json["loader"]["chrome_version"] == "120.0.0.0"


def test_handle_config_set(config_env, capsys):
    manager, ctx = config_env
    assert handle_config(["set", "loader.timeout", "30"], ctx) == 0
    captured = capsys.readouterr()

    assert "Config updated: loader.timeout = 30" in captured.out
    assert manager.get_nested("loader.timeout") == 30


def test_handle_config_set_quoted_value(config_env):
    manager, ctx = config_env
    handle_config(["set", "loader.chrome_version", '"121.0.0.0"'], ctx)
    assert manager.get_nested("loader.chrome_version") == "121.0.0.0"


def test_handle_config_reset(config_env, capsys):
    manager, ctx = config_env

    handle_config(["set", "debug.level", "CRITICAL"], ctx)
    assert manager.get_nested("debug.level") == "CRITICAL"

    assert handle_config(["reset"], ctx) == 0
    captured = capsys.readouterr()

    assert "Configuration has been reset" in captured.out
    assert manager.get_nested("debug.level") == "WARNING"


@pytest.mark.parametrize("args", [[], ["set", "only.key"], ["get"], ["bogus"]])
def test_handle_config_usage_errors(config_env, args):
    _, ctx = config_env
    assert handle_config(args, ctx) == 1


def test_handle_config_get(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["get", "loader.timeout"], ctx) == 0
    assert capsys.readouterr().out.strip() == "15"

    assert handle_config(["get", "analysis"], ctx) == 0
    assert json.loads(capsys.readouterr().out) == {"max_workers": 4}


def test_handle_config_get_unknown_key(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["get", "loader.nope"], ctx) == 1
    assert "Unknown config key" in capsys.readouterr().out
