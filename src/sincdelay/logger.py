"""
Logging configuration for sincdelay

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and sincdelay contributors

MIT License
"""

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "sincdelay"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_level(level: Union[str, int]) -> int:
    """Map a level name (any case) or number to a logging level."""
    if isinstance(level, int):
        return level
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )
    return getattr(logging, name)


def set_global_logging(
    level: Union[str, int] = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for an application built on sincdelay.

    Replaces any handlers on the root logger. Log records go to stderr, so
    sample dumps written to stdout stay machine-readable.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        format_string: Custom format string for log messages
        log_file: Optional file path to also write logs to

    Returns:
        The package logger

    Raises:
        ValueError: If level is not a known level name
    """
    log_level = _parse_level(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        datefmt=DATE_FORMAT,
        force=True,
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (defaults to 'sincdelay'); modules pass __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name or PACKAGE_LOGGER)
