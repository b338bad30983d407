"""Logging setup for applications embedding texel_universe.

Library modules only create loggers (``logging.getLogger(__name__)``); call
:func:`configure_logging` once at startup to attach a handler to the
``texel_universe`` logger.

Environment variables:

* ``LOG_LEVEL``: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO).
* ``LOG_FORMAT``: ``text`` or ``json`` (default text).
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "texel_universe"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "text"

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.ERROR:
            data["source"] = f"{record.filename}:{record.lineno}"
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class TextFormatter(logging.Formatter):
    """``TIMESTAMP LEVEL [logger] message`` with the package prefix dropped."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        name = record.name
        if name.startswith(ROOT_LOGGER_NAME + "."):
            name = name[len(ROOT_LOGGER_NAME) + 1 :]
        line = f"{timestamp} {record.levelname:8s} [{name}] {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_log_level() -> int:
    """Return the level named by ``LOG_LEVEL`` (unknown names mean INFO)."""
    name = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    return _LEVELS.get(name, logging.INFO)


def get_log_format() -> str:
    """Return ``LOG_FORMAT`` if it is ``text`` or ``json``, else ``text``."""
    name = os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()
    return name if name in ("text", "json") else DEFAULT_LOG_FORMAT


def configure_logging(
    level: Optional[int] = None, format_type: Optional[str] = None
) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Args:
        level: Logging level; read from ``LOG_LEVEL`` when ``None``.
        format_type: ``"text"`` or ``"json"``; read from ``LOG_FORMAT`` when ``None``.

    Returns:
        logging.Logger: The configured ``texel_universe`` logger.
    """
    if level is None:
        level = get_log_level()
    if format_type is None:
        format_type = get_log_format()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if format_type == "json" else TextFormatter())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug(
        "Logging configured: level=%s, format=%s",
        logging.getLevelName(level),
        format_type,
    )
    return logger
