"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from tasksync.config import Settings
from tasksync.logging import NOISY_LOGGERS, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Defaults point at the local API and the home cache."""
        for name in ("REMOTE_URL", "CACHE_DIR", "CACHE_KEY", "TIMEOUT"):
            monkeypatch.delenv(f"TASKSYNC_{name}", raising=False)

        settings = Settings()

        assert settings.remote_url == "http://localhost:8080/api"
        assert settings.cache_dir == Path.home() / ".tasksync"
        assert settings.cache_key == "tasks_v1"
        assert settings.timeout == 10.0

    def test_environment_overrides(self, monkeypatch, tmp_path: Path):
        """TASKSYNC_ environment variables override defaults."""
        monkeypatch.setenv("TASKSYNC_REMOTE_URL", "https://tasks.example/api")
        monkeypatch.setenv("TASKSYNC_CACHE_DIR", str(tmp_path))
        monkeypatch.setenv("TASKSYNC_TIMEOUT", "2.5")

        settings = Settings()

        assert settings.remote_url == "https://tasks.example/api"
        assert settings.cache_dir == tmp_path
        assert settings.timeout == 2.5

    def test_arguments_beat_environment(self, monkeypatch):
        """Explicit values win over the environment."""
        monkeypatch.setenv("TASKSYNC_CACHE_KEY", "from_env")
        assert Settings(cache_key="explicit").cache_key == "explicit"


@pytest.fixture
def tasksync_logger():
    """The package logger, with handlers restored afterwards."""
    logger = logging.getLogger("tasksync")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    for handler in logger.handlers[len(handlers) :]:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiet_by_default(self, tasksync_logger):
        """No verbosity and no log file adds no handlers."""
        before = list(tasksync_logger.handlers)
        setup_logging(0, None)
        assert tasksync_logger.handlers == before

    def test_verbose_levels(self, tasksync_logger):
        """-v logs INFO, -vv logs DEBUG."""
        setup_logging(1)
        assert tasksync_logger.level == logging.INFO
        setup_logging(2)
        assert tasksync_logger.level == logging.DEBUG

    def test_log_file(self, tasksync_logger, tmp_path: Path):
        """A log file is created with the startup banner."""
        log_file = tmp_path / "logs" / "tasksync.log"

        setup_logging(0, log_file)
        logging.getLogger("tasksync.services").info("hello from a service")
        for handler in tasksync_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "tasksync starting" in content
        assert "hello from a service" in content

    def test_quiets_http_request_logs(self, tasksync_logger):
        """httpx request lines are left to RemoteClient's own timing logs."""
        setup_logging(2)

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
