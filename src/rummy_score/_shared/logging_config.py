# Area: Shared
"""
rummy_score._shared.logging_config — Logging setup
==================================================

The package logs to stderr (level names colored) and, optionally, to a
JSON-lines file. Persistence failures are logged as a structured block
with the failed operation attached to the record.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..errors import PersistenceError

PACKAGE_LOGGER = "rummy_score"
TERMINAL_FORMAT = "%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s"
TERMINAL_DATEFMT = "%H:%M:%S"

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
RESET = "\033[0m"

# Record attributes copied into JSON lines when a call passes them as extra
STRUCTURED_FIELDS = ("operation", "error_type")

logger = logging.getLogger(PACKAGE_LOGGER)


class TerminalFormatter(logging.Formatter):
    """Wraps the level name in an ANSI color; the record itself is left untouched."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().formatMessage(record)
        values = dict(record.__dict__, levelname=f"{color}{record.levelname}{RESET}")
        return self._fmt % values


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                data[field] = getattr(record, field)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data)


def _terminal_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(TERMINAL_FORMAT, TERMINAL_DATEFMT))
    return handler


def _file_handler(log_file_path: str, level: int) -> logging.Handler:
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: Optional[str] = "rummy_score.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure the package logger. Safe to call more than once.

    Parameters
    ----------
    log_file_path : str or None
        JSON log file. None logs to stderr only.
    level : int
        Logging level. Defaults to INFO.
    """
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(_terminal_handler(level))

    if log_file_path:
        try:
            logger.addHandler(_file_handler(log_file_path, level))
        except OSError as e:
            logger.warning(f"Could not create log file {log_file_path}: {e}")


def log_persistence_failure(error: "PersistenceError") -> None:
    """Log a failed save or load as a structured ERROR record."""
    logger.error(
        error.format_error_log(),
        extra={
            "operation": error.operation,
            "error_type": error.__class__.__name__,
        },
    )
