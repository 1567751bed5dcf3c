"""Tests for settings and configuration loading."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from plugcli.config_loader import ConfigLoader
from plugcli.models import ConfigError
from plugcli.settings import Settings, coerce_to_bool


@pytest.mark.parametrize("value", ["1", "true", "yes", "on", "anything", True])
def test_coerce_true(value):
    assert coerce_to_bool(value) is True


@pytest.mark.parametrize("value", ["0", "false", "No", " OFF ", "disabled", "", "  ", False])
def test_coerce_false(value):
    assert coerce_to_bool(value) is False


def test_coerce_default():
    assert coerce_to_bool(None) is False
    assert coerce_to_bool(None, default=True) is True


def test_defaults():
    settings = Settings.from_environ({})
    assert settings == Settings()
    assert settings.help is False
    assert settings.home is None
    assert settings.mode is None
    assert settings.config_file is None


def test_from_environ():
    environ = {
        "PLUGCLI_HELP": "1",
        "PLUGCLI_HOME": "/srv/app",
        "PLUGCLI_MODE": "production",
        "PLUGCLI_NO_DETECT": "yes",
        "PLUGCLI_DEBUG": "1",
        "PLUGCLI_CONFIG": "/etc/plugcli.toml",
        "PYTEST_CURRENT_TEST": "tests/test_settings.py::test_from_environ (call)",
    }
    settings = Settings.from_environ(environ)
    assert settings.help is True
    assert settings.home == Path("/srv/app")
    assert settings.mode == "production"
    assert settings.no_detect is True
    assert settings.debug is True
    assert settings.harness_active is True
    assert settings.config_file == Path("/etc/plugcli.toml")
    assert settings.environ == environ


def test_app_loader_only_needs_presence():
    assert Settings.from_environ({"PLUGCLI_APP_LOADER": ""}).app_loader is True
    assert Settings.from_environ({"PLUGCLI_APP_LOADER": "0"}).app_loader is True
    assert Settings.from_environ({}).app_loader is False


def test_falsy_switches():
    settings = Settings.from_environ({"PLUGCLI_NO_DETECT": "0", "PLUGCLI_HELP": "false", "PLUGCLI_MODE": ""})
    assert settings.no_detect is False
    assert settings.help is False
    assert settings.mode is None


def test_environ_is_copied():
    environ = {"PLUGCLI_MODE": "a"}
    settings = Settings.from_environ(environ)
    environ["PLUGCLI_MODE"] = "b"
    assert settings.environ["PLUGCLI_MODE"] == "a"


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PLUGCLI_MODE", "staging")
    assert Settings.from_environ().mode == "staging"


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_no_file(self, tmp_path):
        assert ConfigLoader(Mock()).load(home=tmp_path) == {}
        assert ConfigLoader(Mock()).load() == {}

    def test_home_file(self, tmp_path):
        (tmp_path / "plugcli.toml").write_text('[plugcli]\nnamespaces = ["a.b"]\n')
        assert ConfigLoader(Mock()).load(home=tmp_path) == {"plugcli": {"namespaces": ["a.b"]}}

    def test_explicit_file_wins(self, tmp_path):
        (tmp_path / "plugcli.toml").write_text('[plugcli]\nhint = "home"\n')
        explicit = tmp_path / "other.toml"
        explicit.write_text('[plugcli]\nhint = "explicit"\n')
        assert ConfigLoader(Mock()).load(explicit, home=tmp_path) == {"plugcli": {"hint": "explicit"}}

    def test_explicit_file_missing(self, tmp_path):
        log = Mock()
        with pytest.raises(ConfigError, match="Config file not found"):
            ConfigLoader(log).load(tmp_path / "missing.toml")
        log.critical.assert_called_once()

    def test_explicit_file_with_variables(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PLUGCLI_TEST_DIR", str(tmp_path))
        (tmp_path / "conf.toml").write_text("a = 1\n")
        assert ConfigLoader(Mock()).load("$PLUGCLI_TEST_DIR/conf.toml") == {"a": 1}

    def test_syntax_error(self, tmp_path):
        (tmp_path / "plugcli.toml").write_text("[plugcli\n")
        log = Mock()
        with pytest.raises(ConfigError, match="Problem reading"):
            ConfigLoader(log).load(home=tmp_path)
        log.critical.assert_called_once()
