"""Logging for rdftypes.

Loggers are namespaced under ``rdftypes`` and write either plain text
or one JSON object per line, as selected by ``RDFTYPES_LOG_FORMAT``.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any

from rdftypes.core.config import get_settings

ROOT_LOGGER = "rdftypes"


class StructuredFormatter(logging.Formatter):
    """JSON-formatted log output for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class PlainFormatter(logging.Formatter):
    """Human-readable plain text log format."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def _make_handler(level: int, format: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if format == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(PlainFormatter())
    return handler


def setup_logging(level: str | None = None, format: str | None = None) -> logging.Logger:
    """Configure the ``rdftypes`` package logger.

    Arguments left as None fall back to the current settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ("plain" or "structured")

    Returns:
        The package root logger
    """
    settings = get_settings()
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(resolved)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_make_handler(resolved, format or settings.log_format))
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Module loggers inherit handlers from the package logger, which is
    configured from settings the first time any logger is requested.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        setup_logging()

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class LogContext:
    """Context manager for adding extra data to log messages.

    Example:
        >>> logger = get_logger(__name__)
        >>> with LogContext(logger, file_set_id="fs-1"):
        ...     logger.info("Validating file set")
    """

    def __init__(self, logger: logging.Logger, **extra: Any) -> None:
        self.logger = logger
        self.extra = extra
        self._old_factory: Any = None

    def __enter__(self) -> "LogContext":
        old_factory = logging.getLogRecordFactory()
        extra = self.extra

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.extra_data = extra  # type: ignore[attr-defined]
            return record

        self._old_factory = old_factory
        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, *args: Any) -> None:
        if self._old_factory:
            logging.setLogRecordFactory(self._old_factory)
