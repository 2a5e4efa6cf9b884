"""Runtime configuration model for fixturekit.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_FIXTURE_ROOT,
    DEFAULT_LOG_LEVEL,
    FIXTURE_ROOT_ENV,
    LOG_LEVEL_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import FixtureConfigError


@dataclass(frozen=True)
class FixtureConfig:
    """Validated runtime configuration.

    Attributes:
        fixture_root: Directory that relative fixture names resolve against.
        log_level: Minimum log level emitted by fixturekit loggers.
    """

    fixture_root: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "FixtureConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FixtureConfigError: If environment values are invalid.
        """
        fixture_root_value = os.getenv(FIXTURE_ROOT_ENV, str(DEFAULT_FIXTURE_ROOT))
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
        return cls(
            fixture_root=Path(fixture_root_value).expanduser().resolve(),
            log_level=log_level,
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased standard level name.

    Raises:
        FixtureConfigError: If value is not a standard level name.
    """
    normalized_value = raw_value.strip().upper()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise FixtureConfigError(
        f"Invalid {LOG_LEVEL_ENV} value: '{raw_value}'. "
        f"Set {LOG_LEVEL_ENV} to one of: {supported_rows}."
    )
