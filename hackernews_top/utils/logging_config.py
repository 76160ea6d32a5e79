"""Structured logging configuration.

Log records go to stderr so that stdout stays reserved for the rendered
post list.
"""

import json
import logging
import sys
from typing import Any

from hackernews_top.utils.config import get_settings

# Context keys the fetcher attaches through ``extra=``
CONTEXT_FIELDS = ("stage", "post_id", "url", "count", "accepted")

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """JSON formatter emitting one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with log data
        """
        settings = get_settings()

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "app_name": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Plain text formatter."""

    def __init__(self) -> None:
        fmt = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"
        super().__init__(fmt=fmt, datefmt=datefmt)


_logging_configured = False


def _is_own_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and getattr(
        handler, "stream", None
    ) is sys.stderr


def setup_logging(use_json: bool = False, force_reconfigure: bool = False) -> None:
    """
    Configure application logging.

    Installs a single stderr handler at the LOG_LEVEL from settings. Handlers
    installed by others (pytest's caplog, for one) are left alone.

    Args:
        use_json: If True, use JSON format. If False, use standard text format.
        force_reconfigure: If True, force reconfiguration even if already set up.
    """
    global _logging_configured

    if _logging_configured and not force_reconfigure:
        return

    settings = get_settings()
    root_logger = logging.getLogger()

    for handler in [h for h in root_logger.handlers if _is_own_handler(h)]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, settings.LOG_LEVEL)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JsonFormatter() if use_json else StandardFormatter())
    root_logger.addHandler(console_handler)

    # Per-request transport logs only show up in debug mode
    transport_level = logging.DEBUG if settings.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    _logging_configured = True

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, format=%s",
        settings.LOG_LEVEL,
        "json" if use_json else "standard",
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Ensures logging is set up before returning the logger.

    Args:
        name: Name for the logger (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name)


def reset_logging() -> None:
    """Reset logging configuration. Used by tests to clear state."""
    global _logging_configured

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)

    _logging_configured = False
