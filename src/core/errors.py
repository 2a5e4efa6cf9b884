"""Fixturekit exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class FixtureError(Exception):
    """Base exception for all fixturekit failures."""


class FixtureConfigError(FixtureError):
    """Raised for invalid runtime configuration."""


class FixtureLoadError(FixtureError):
    """Raised when a fixture file cannot be read or parsed."""


class FixtureAdaptationError(FixtureError):
    """Raised when a fixture value cannot be adapted to the requested type.

    Attributes:
        type_name: Display name of the requested type.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Failed to adapt fixture value to requested type '{type_name}'. "
            "Check the fixture key and the shape of its value."
        )
        self.type_name = type_name
