"""
Logging - Text and JSON log formatting for the command line.

JSON output emits one object per line so logs can be shipped to an
aggregator unchanged.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, TextIO


# Attributes present on every LogRecord; anything else came in via ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def __init__(
        self,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
        include_location: bool = False,
        static_fields: dict[str, Any] | None = None,
    ):
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level
        self.include_logger = include_logger
        self.include_location = include_location
        self.static_fields = static_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {}

        if self.include_timestamp:
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
            entry["timestamp"] = ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"
        if self.include_level:
            entry["level"] = record.levelname
        if self.include_logger:
            entry["logger"] = record.name

        entry["message"] = record.getMessage()
        entry.update(self.static_fields)

        if self.include_location:
            entry["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
            }

        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter: ``time LEVEL logger: message``."""

    DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    def __init__(self, fmt: str | None = None, datefmt: str | None = "%H:%M:%S"):
        super().__init__(fmt or self.DEFAULT_FORMAT, datefmt=datefmt)


def setup_logging(
    level: int = logging.INFO,
    log_format: str = "text",
    static_fields: dict[str, Any] | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Logging level
        log_format: "text" or "json"
        static_fields: Fields added to every JSON record
        stream: Output stream, defaults to stderr

    Returns:
        The configured root logger
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format == "json":
        handler.setFormatter(JSONFormatter(static_fields=static_fields))
    else:
        handler.setFormatter(TextFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # requests/urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
