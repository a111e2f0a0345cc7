"""Logger configuration for fnkit.

The package logger only carries a ``NullHandler``; records propagate to
whatever the host application configured. Call ``setup_logger`` to attach
a stream handler explicitly.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

DEFAULT_LEVEL = logging.WARNING


def _resolve_level(level: str | int | None) -> int:
    """Map a level name or number to a logging level, WARNING if unknown."""
    if level is None or level == "":
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    level = level.strip()
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    return DEFAULT_LEVEL


def setup_logger(
    name: str = "fnkit",
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level name (DEBUG, INFO, ...) or number. Falls back to
               the FNKIT_LOG_LEVEL environment variable, then WARNING.
               Unknown names resolve to WARNING.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.getenv("FNKIT_LOG_LEVEL")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only attach a stream handler once
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))

    return logger


logger = logging.getLogger(__package__ or "fnkit")
logger.addHandler(logging.NullHandler())
