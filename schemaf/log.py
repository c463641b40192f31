"""Central application logger that writes structured JSON lines to stderr.

Replace the logger with :func:`set_logger` to route records elsewhere.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_ATTRS_KEY = "schemaf_attrs"

_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}


class JsonFormatter(logging.Formatter):
    """Formats a record as one JSON object with time, level, msg and attributes."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .astimezone()
            .isoformat(),
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname),
            "msg": record.getMessage(),
        }
        entry.update(getattr(record, _ATTRS_KEY, None) or {})
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _default_logger() -> logging.Logger:
    logger = logging.getLogger("schemaf")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


_state: dict[str, logging.Logger] = {"logger": _default_logger()}


def set_logger(logger: logging.Logger) -> None:
    """Replace the global logger."""
    if not isinstance(logger, logging.Logger):
        raise TypeError(f"expected a logging.Logger, got {type(logger).__name__}")
    _state["logger"] = logger


def get_logger() -> logging.Logger:
    """Return the current global logger."""
    return _state["logger"]


def _log(level: int, msg: str, attrs: dict[str, Any]) -> None:
    _state["logger"].log(level, msg, extra={_ATTRS_KEY: attrs}, stacklevel=3)


def debug(msg: str, **kwargs: Any) -> None:
    _log(logging.DEBUG, msg, kwargs)


def info(msg: str, **kwargs: Any) -> None:
    _log(logging.INFO, msg, kwargs)


def warn(msg: str, **kwargs: Any) -> None:
    _log(logging.WARNING, msg, kwargs)


def error(msg: str, **kwargs: Any) -> None:
    _log(logging.ERROR, msg, kwargs)