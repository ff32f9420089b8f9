"""Structured logging for liftlog.

Controlled via LIFTLOG_LOG_FORMAT env var: "json" (default) or "text".
Both formats carry the ``liftlog_*`` extras the engine attaches to its
records (branch taken, trend, exercise, set counts).
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

LOG_FORMATS = ("json", "text")

_EXTRA_PREFIX = "liftlog_"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def liftlog_extras(record: logging.LogRecord) -> dict[str, Any]:
    """The ``liftlog_*`` attributes passed via ``extra=``, in insertion order."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key.startswith(_EXTRA_PREFIX)
    }


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        log_entry.update(liftlog_extras(record))
        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Plaintext lines with ``liftlog_*`` extras appended as ``key=value`` pairs.

    The prefix is dropped from the key: ``liftlog_trend`` prints as ``trend=stable``.
    """

    def __init__(self) -> None:
        super().__init__(_TEXT_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        pairs = [
            f"{key[len(_EXTRA_PREFIX):]}={value}"
            for key, value in liftlog_extras(record).items()
        ]
        if pairs:
            line = f"{line} [{' '.join(pairs)}]"
        return line


def setup_logging(log_format: str, level: int = logging.INFO) -> None:
    """Configure root logger with either JSON or plaintext format."""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicate output
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    root.addHandler(handler)
