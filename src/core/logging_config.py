"""Structured logging configuration.

This module initializes structlog with a stable structured format.
All fixturekit modules obtain their loggers through ``get_logger``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.config import FixtureConfig
from core.constants import DEFAULT_LOG_LEVEL
from core.errors import FixtureConfigError


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and the minimum emitted level.

    Args:
        log_level: Standard level name such as ``INFO`` or ``DEBUG``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        _configure_from_env()
    return structlog.get_logger(name)


def _configure_from_env() -> None:
    """Configure logging with the level from ``FixtureConfig``."""
    try:
        log_level = FixtureConfig.from_env().log_level
    except FixtureConfigError as error:
        configure_logging()
        structlog.get_logger(__name__).warning("invalid_log_level", error=str(error))
        return
    configure_logging(log_level)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # resolved per call so redirected stderr streams are honoured
    return structlog.PrintLogger(file=sys.stderr)
