"""Logging utilities for reco."""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "reco"
PRINT = 15

_LOG_FORMAT = "[%(tag)s] %(message)s"
_MAX_BYTES = 10 * 1024 * 1024
_BACKUP_COUNT = 5

_TAGS = {
    logging.DEBUG: "debu",
    PRINT: "prin",
    logging.INFO: "info",
    logging.WARNING: "erro",
    logging.ERROR: "erro",
    logging.CRITICAL: "fata",
}

# --verbose 1..4
VERBOSITY_LEVELS = {
    1: logging.ERROR,
    2: logging.INFO,
    3: PRINT,
    4: logging.DEBUG,
}

logging.addLevelName(PRINT, "PRINT")


class TagFormatter(logging.Formatter):
    """Render records as ``[tag] message`` with four-letter level tags."""

    def __init__(self) -> None:
        super().__init__(_LOG_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.tag = _TAGS.get(record.levelno, "info")
        return super().format(record)


def level_for_verbosity(verbose: int) -> int:
    try:
        return VERBOSITY_LEVELS[verbose]
    except KeyError:
        raise ValueError(f"verbosity must be between 1 and 4, got {verbose}") from None


def configure_logging(
    log_path: Path | None = None,
    *,
    level: int = logging.INFO,
    max_bytes: int = _MAX_BYTES,
    backup_count: int = _BACKUP_COUNT,
) -> logging.Logger:
    """Configure and return the logger used throughout the application.

    Log lines always go to standard output. When *log_path* is given they are
    also written to a rotating file.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    formatter = TagFormatter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger, e.g. ``reco.mover``."""

    return logging.getLogger(f"{LOGGER_NAME}.{name}")


__all__ = [
    "PRINT",
    "TagFormatter",
    "configure_logging",
    "get_logger",
    "level_for_verbosity",
]
