"""
Logging utilities for apifilter.
"""

import logging
import sys
from typing import Optional


# Default format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level logger cache
_loggers: dict = {}


def resolve_level(level: str) -> int:
    """
    Convert a level name (case-insensitive) to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return value


def setup_logger(
    name: str = "apifilter",
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        log_file: Optional file path for logging
        date_format: Custom date format

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[name] = logger

    return logger


def get_logger(name: str = "apifilter") -> logging.Logger:
    """
    Get a logger by name.

    Loggers below the ``apifilter`` namespace are left unconfigured so
    their records propagate to the package logger.

    Args:
        name: Logger name

    Returns:
        Logger instance (creates default if not exists)
    """
    if name in _loggers:
        return _loggers[name]
    if name != "apifilter" and name.startswith("apifilter."):
        logger = logging.getLogger(name)
        _loggers[name] = logger
        return logger
    return setup_logger(name)
