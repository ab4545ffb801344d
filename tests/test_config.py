"""Tests for the configuration module."""

import pytest

from mini_log.config import Config, load_config


def test_config_defaults():
    cfg = Config()
    assert cfg.script_path == ""
    assert cfg.log_level == "WARNING"
    assert cfg.dry_run is False


def test_config_frozen():
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.log_level = "DEBUG"


def test_load_config_positional_script(monkeypatch):
    monkeypatch.delenv("MINI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MINI_LOG_DRY_RUN", raising=False)
    cfg = load_config(["session.yml"])
    assert cfg.script_path == "session.yml"
    assert cfg.log_level == "WARNING"
    assert cfg.dry_run is False


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("MINI_LOG_LEVEL", "debug")
    monkeypatch.setenv("MINI_LOG_DRY_RUN", "yes")
    cfg = load_config(["session.yml"])
    assert cfg.log_level == "DEBUG"
    assert cfg.dry_run is True


def test_cli_args_override_env(monkeypatch):
    monkeypatch.setenv("MINI_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("MINI_LOG_DRY_RUN", "false")
    cfg = load_config(["session.yml", "--log-level", "info", "--dry-run"])
    assert cfg.log_level == "INFO"
    assert cfg.dry_run is True


def test_invalid_cli_log_level_rejected():
    with pytest.raises(SystemExit) as info:
        load_config(["session.yml", "--log-level", "LOUD"])
    assert info.value.code == 2


def test_invalid_env_log_level_rejected(monkeypatch):
    monkeypatch.setenv("MINI_LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as info:
        load_config(["session.yml"])
    assert info.value.code == 2


def test_missing_script_argument():
    with pytest.raises(SystemExit):
        load_config([])
