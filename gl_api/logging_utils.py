"""Logging utilities for gl-api."""

from __future__ import annotations

import logging
import sys

# Indexed by verbosity offset from the default (WARNING)
LOG_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]
DEFAULT_LEVEL_INDEX = LOG_LEVELS.index(logging.WARNING)


class CliFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = f"[{record.levelname:<7}] {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def level_for_verbosity(verbosity: int) -> int:
    """Map --verbose/--quiet counts (verbose minus quiet) to a logging level."""
    index = min(max(DEFAULT_LEVEL_INDEX + verbosity, 0), len(LOG_LEVELS) - 1)
    return LOG_LEVELS[index]


def setup_logging(verbosity: int = 0) -> logging.Logger:
    logger = logging.getLogger("gl-api")
    logger.setLevel(level_for_verbosity(verbosity))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CliFormatter())
    logger.addHandler(handler)
    return logger
