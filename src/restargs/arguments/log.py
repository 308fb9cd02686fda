"""
Logging bootstrap for restargs.

The library only creates module loggers under the ``restargs`` namespace; the package
root carries a NullHandler so nothing is emitted unless the application configures
logging. `configure_logging` is an opt-in helper that attaches a JSON-lines handler.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

from .config import ArgumentsSettings

__all__ = [
    "LOGGER_NAME",
    "JsonLineFormatter",
    "configure_logging",
]

LOGGER_NAME = "restargs"

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonLineFormatter(logging.Formatter):
    """
    One JSON object per record.

    Any ``extra=`` fields passed at the call site (e.g. ``api``, ``mode``) are copied
    into the object; values that are not JSON-serializable are rendered with repr().
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(
            (k, v) for k, v in vars(record).items() if k not in _RECORD_ATTRS and not k.startswith("_")
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=repr)


def configure_logging(
    settings: ArgumentsSettings | None = None, stream: TextIO | None = None
) -> logging.Logger:
    """
    Configure the ``restargs`` logger from settings and return it.

    Replaces handlers previously installed by this function so repeated calls do not
    duplicate output.
    """
    settings = settings or ArgumentsSettings()
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old in [h for h in logger.handlers if isinstance(h.formatter, JsonLineFormatter)]:
        logger.removeHandler(old)
        old.close()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonLineFormatter())
    logger.addHandler(handler)
    return logger
