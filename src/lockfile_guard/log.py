"""Logging setup for command-line entrypoints."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def _log_level() -> int:
    """Translate LOG_LEVEL env to a logging level with WARNING fallback."""
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level, logging.WARNING)


def configure_logging() -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger("lockfile_guard")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(_log_level())
    return logger
