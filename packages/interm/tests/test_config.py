"""Tests for interm.config"""
import os

from interm.config import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ENV_WRITE_LOG,
    get_log_level,
    get_write_log_path,
    load_settings,
)


def test_env_names():
    assert ENV_WRITE_LOG == "INTERM_WRITE_LOG"
    assert ENV_LOG_LEVEL == "INTERM_LOG_LEVEL"


def test_defaults(monkeypatch):
    monkeypatch.delenv(ENV_WRITE_LOG, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    settings = load_settings()
    assert settings.write_log_path is None
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_write_log_path_expands_user(monkeypatch):
    monkeypatch.setenv(ENV_WRITE_LOG, "~/interm.log")
    assert get_write_log_path() == os.path.join(os.path.expanduser("~"), "interm.log")


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, " debug ")
    assert get_log_level() == "DEBUG"


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "chatty")
    assert get_log_level() == DEFAULT_LOG_LEVEL
