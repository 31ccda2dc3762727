"""Logging setup for ravyz-match.

Every module logs through ``logging.getLogger(__name__)``; records from
``ravyz_match.*`` reach the handlers installed on the package logger here.
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "ravyz_match"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# aiosqlite logs every statement at DEBUG.
QUIET_LOGGERS = ("aiosqlite",)

_configured = False


def _build_handlers(log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def configure_logging(
    level: str | None = None,
    log_file: Path | str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Install handlers on the package logger and return it.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to INFO.
        log_file: Optional file that receives the same records as stderr.
            Only honoured on the first call; later calls just change levels.
        format_string: Format string for log messages.
        date_format: Format string for timestamps.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    logger.handlers.clear()
    formatter = logging.Formatter(format_string, datefmt=date_format)
    for handler in _build_handlers(Path(log_file) if log_file else None):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    _configured = True
    return logger


def reset_logging() -> None:
    """Drop installed handlers (useful for testing)."""
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)

    _configured = False
