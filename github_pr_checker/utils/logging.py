"""
Logging configuration and utilities
"""

import logging
import sys
from typing import Optional

from ..config import get_settings

PACKAGE_LOGGER_PREFIX = "github_pr_checker"


def setup_logging(
    name: Optional[str] = None,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging configuration

    Log records go to stderr so that stdout only carries the report.

    Args:
        name: Logger name
        level: Log level
        format_string: Log format string

    Returns:
        Configured logger instance
    """
    settings = get_settings()

    # Use provided parameters or fall back to settings
    log_level = level or settings.log_level
    log_format = format_string or settings.log_format

    logger = logging.getLogger(name or __name__)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return setup_logging(name)


def set_log_level(level: str) -> None:
    """
    Change the level of every logger created for this package

    Args:
        level: Log level name, e.g. "DEBUG"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(PACKAGE_LOGGER_PREFIX) and isinstance(logger, logging.Logger):
            logger.setLevel(numeric_level)
