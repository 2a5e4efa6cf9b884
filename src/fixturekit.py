"""Public SDK surface for fixturekit.

This module provides a stable import path for test suites.
It re-exports the fixture store, loader and error types.
"""

from __future__ import annotations

from core.adaptation import adapt, adapt_or_none
from core.config import FixtureConfig
from core.errors import FixtureAdaptationError, FixtureError, FixtureLoadError
from core.naming import type_name_to_key
from fixtures.fixture_loader import load_fixture, resolve_fixture_path
from fixtures.fixture_store import FixtureStore

__all__ = [
    "FixtureAdaptationError",
    "FixtureConfig",
    "FixtureError",
    "FixtureLoadError",
    "FixtureStore",
    "adapt",
    "adapt_or_none",
    "load_fixture",
    "resolve_fixture_path",
    "type_name_to_key",
]
