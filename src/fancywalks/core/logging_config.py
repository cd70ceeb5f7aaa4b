"""
Logging setup for the fancywalks command.

Console output goes to stderr, leaving stdout to the record dump. Colored
level names in development, plain lines in production. An optional rotating
log file takes plain text or one JSON object per line.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_FORMATS = {
    "development": "%(levelname)s %(asctime)s %(name)s:%(lineno)d  %(message)s",
    "production": "%(asctime)s %(levelname)s %(name)s  %(message)s",
}
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(funcName)s:%(lineno)d  %(message)s"

# 10MB per file, 5 backups
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Attributes present on every LogRecord; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, including any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().formatMessage(record)

        plain = record.levelname
        record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = plain


def get_log_level(level_name: str) -> int:
    """Map a level name such as ``"debug"`` to its constant, INFO if unknown."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(level: int, environment: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if environment == "development":
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMATS["development"], DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMATS["production"], DATE_FORMAT))
    return handler


def _file_handler(log_file: Path, level: int, json_logs: bool) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_logs else logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    enable_console: bool = True,
    environment: str = "development",
) -> None:
    """
    Configure the root logger, replacing any handlers already on it.

    Args:
        log_level: Level name; defaults to DEBUG in development, INFO otherwise
        log_file: Also log to this rotating file
        json_logs: Write the log file as JSON lines
        enable_console: Log to stderr
        environment: "development" or "production"
    """
    if log_level is None:
        log_level = "DEBUG" if environment == "development" else "INFO"
    level = get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if enable_console:
        root_logger.addHandler(_console_handler(level, environment))
    if log_file:
        root_logger.addHandler(_file_handler(log_file, level, json_logs))

    root_logger.debug(
        f"Logging at {logging.getLevelName(level)} for {environment}, "
        f"console={enable_console}, file={log_file}"
    )
