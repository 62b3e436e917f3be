"""Tests for the logging config loader."""

import json
import logging
from pathlib import Path

import pytest

from searchkit.logging_config import DEFAULT_LOG_CONFIG, log_init, resolve_log_config_path


@pytest.fixture
def log_config(tmp_path):
    path = tmp_path / "logging.json"
    path.write_text(json.dumps({
        "version": 1,
        "disable_existing_loggers": False,
        "loggers": {"searchkit": {"level": "WARNING"}},
    }))
    return path


@pytest.fixture(autouse=True)
def restore_searchkit_logger():
    logger = logging.getLogger("searchkit")
    level, propagate = logger.level, logger.propagate
    yield
    logger.setLevel(level)
    logger.propagate = propagate


class TestResolvePath:

    def test_argument_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_CONFIG", "/from/env.json")
        assert resolve_log_config_path(tmp_path / "x.json") == tmp_path / "x.json"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("LOG_CONFIG", "/from/env.json")
        assert str(resolve_log_config_path()) == "/from/env.json"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("LOG_CONFIG", raising=False)
        assert resolve_log_config_path() == DEFAULT_LOG_CONFIG

    def test_default_file_ships_with_package(self):
        import searchkit

        package_dir = Path(searchkit.__file__).resolve().parent
        assert DEFAULT_LOG_CONFIG.parent == package_dir
        assert DEFAULT_LOG_CONFIG.is_file()

    def test_default_file_is_valid_json(self):
        config = json.loads(DEFAULT_LOG_CONFIG.read_text())
        assert config["version"] == 1
        assert "searchkit" in config["loggers"]


class TestLogInit:

    def test_applies_config(self, log_config):
        assert log_init(log_config) == log_config
        assert logging.getLogger("searchkit").level == logging.WARNING

    def test_level_override(self, log_config):
        log_init(log_config, level="DEBUG")
        assert logging.getLogger("searchkit").level == logging.DEBUG

    def test_env_var_path(self, monkeypatch, log_config):
        monkeypatch.setenv("LOG_CONFIG", str(log_config))
        assert log_init() == log_config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            log_init(tmp_path / "missing.json")
