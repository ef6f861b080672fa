"""Tests for the shared logging setup."""

import logging
import logging.handlers

import pytest
from shared import logging as app_logging


@pytest.fixture()
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    yield tmp_path
    monkeypatch.undo()
    app_logging.configure_logging(force=True)


def _file_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


class TestConfigureLogging:
    def test_repeated_calls_keep_one_set_of_handlers(self, log_dir):
        app_logging.configure_logging(force=True)
        handlers = list(logging.getLogger().handlers)

        app_logging.configure_logging()
        app_logging.configure_logging()

        assert logging.getLogger().handlers == handlers
        assert len(_file_handlers()) == 2

    def test_forced_reconfiguration_closes_the_previous_files(self, log_dir):
        app_logging.configure_logging(force=True)
        previous = _file_handlers()

        app_logging.configure_logging(force=True)

        assert all(handler.stream is None for handler in previous)
        assert not set(previous) & set(_file_handlers())
        assert len(_file_handlers()) == 2

    def test_foreign_handlers_are_left_alone(self, log_dir):
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        try:
            app_logging.configure_logging(force=True)
            assert foreign in logging.getLogger().handlers
        finally:
            logging.getLogger().removeHandler(foreign)

    def test_log_files_are_written_under_log_dir(self, log_dir):
        app_logging.configure_logging(force=True)
        assert (log_dir / app_logging.LOG_FILE).exists()
        assert (log_dir / app_logging.ERROR_LOG_FILE).exists()


class TestEnvironment:
    def test_level_follows_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert app_logging.log_level("production") == "INFO"
        assert app_logging.log_level("test") == "WARNING"
        assert app_logging.log_level("unknown") == "INFO"

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert app_logging.log_level("production") == "DEBUG"

    def test_environment_falls_back_to_protean_env(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "Staging")
        assert app_logging.current_environment() == "staging"
