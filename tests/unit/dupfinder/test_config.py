"""Unit tests for settings and structlog configuration."""

import logging

import pytest
import structlog

from dupfinder.config.logging import add_app_context, configure_logging
from dupfinder.config.settings import DupFinderSettings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_COLORS", "USE_TRASH", "PROGRESS_INTERVAL"):
            monkeypatch.delenv(f"DUPFINDER_{name}", raising=False)

        settings = DupFinderSettings()

        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_colors is False
        assert settings.use_trash is False
        assert settings.progress_interval == 100

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("DUPFINDER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("dupfinder_use_trash", "1")
        monkeypatch.setenv("DUPFINDER_PROGRESS_INTERVAL", "7")
        monkeypatch.setenv("DUPFINDER_LOG_COLORS", "yes")

        settings = DupFinderSettings()

        assert settings.log_level == "DEBUG"
        assert settings.use_trash is True
        assert settings.progress_interval == 7
        assert settings.log_colors is True

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_app_context_added(self):
        event_dict = add_app_context(None, "info", {"event": "x"})

        assert event_dict["app"] == "dupfinder"

    def test_json_renderer(self):
        configure_logging(level="INFO", json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_app_context in processors
        assert logging.getLogger().level == logging.INFO

    def test_console_renderer(self):
        configure_logging(level="debug", json_format=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_events_keep_keyword_context(self):
        configure_logging(level="INFO")

        with structlog.testing.capture_logs() as logs:
            structlog.get_logger("dupfinder.test").info("dupfinder_test_event", answer=42)

        assert logs == [{"event": "dupfinder_test_event", "answer": 42, "log_level": "info"}]
