"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from hackernews_top.utils.config import reset_settings
from hackernews_top.utils.logging_config import (
    JsonFormatter,
    StandardFormatter,
    get_logger,
    setup_logging,
)


def stderr_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_configures_root_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING
        assert len(stderr_handlers()) == 1

    def test_setup_logging_prevents_duplicate_handlers(self) -> None:
        setup_logging()
        setup_logging()
        setup_logging(force_reconfigure=True)

        assert len(stderr_handlers()) == 1

    def test_formatter_choice(self) -> None:
        setup_logging(use_json=True)
        assert isinstance(stderr_handlers()[0].formatter, JsonFormatter)

        setup_logging(use_json=False, force_reconfigure=True)
        assert isinstance(stderr_handlers()[0].formatter, StandardFormatter)

    def test_httpx_quiet_unless_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        setup_logging()
        assert logging.getLogger("httpx").level == logging.WARNING

        monkeypatch.setenv("DEBUG", "true")
        reset_settings()
        setup_logging(force_reconfigure=True)
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_get_logger_configures_lazily(self) -> None:
        logger = get_logger("hackernews_top.test")

        assert logger.name == "hackernews_top.test"
        assert len(stderr_handlers()) == 1


class TestLogLevels:
    """Test that LOG_LEVEL is respected."""

    def test_info_level_filters_debug_messages(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        setup_logging()
        logger = get_logger("test")

        logger.debug("This should not appear")
        logger.info("This should appear")

        assert "This should not appear" not in caplog.messages
        assert "This should appear" in caplog.messages


class TestJsonFormatter:
    """Test the JSON formatter output."""

    def test_includes_app_fields_and_context(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "hn-test")
        monkeypatch.setenv("ENVIRONMENT", "development")
        record = logging.LogRecord(
            name="hackernews_top.scraper.fetcher",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="Item %d fetch failed",
            args=(42,),
            exc_info=None,
        )
        record.stage = "item"
        record.post_id = 42

        data = json.loads(JsonFormatter().format(record))

        assert data["message"] == "Item 42 fetch failed"
        assert data["level"] == "ERROR"
        assert data["app_name"] == "hn-test"
        assert data["environment"] == "development"
        assert data["stage"] == "item"
        assert data["post_id"] == 42
        assert "exception" not in data

    def test_includes_exception(self) -> None:
        try:
            raise ValueError("bad body")
        except ValueError:
            record = logging.LogRecord(
                name="t", level=logging.ERROR, pathname=__file__, lineno=1,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad body" in data["exception"]
