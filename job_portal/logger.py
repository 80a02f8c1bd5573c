"""Logging configuration for the job portal core."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level_name: str) -> None:
    """Apply a level name such as "INFO" or "debug" to the package loggers.

    Module loggers leave their own level unset, so they inherit this one.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.getLogger("job_portal").setLevel(level)
