"""Logging setup for Axiology."""

import logging

import structlog

from axiology.config import get_config


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog to drop events below the given level.

    Args:
        log_level: Standard logging level name (DEBUG, INFO, ...);
            defaults to the configured ``log_level``

    Raises:
        ValueError: If the level name is not a standard logging level
    """
    log_level = log_level or get_config().log_level
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
