"""Core constants used across fixturekit modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_FIXTURE_ROOT = Path("tests") / "fixtures"
DEFAULT_LOG_LEVEL = "INFO"
FIXTURE_ROOT_ENV = "FIXTUREKIT_FIXTURE_ROOT"
LOG_LEVEL_ENV = "FIXTUREKIT_LOG_LEVEL"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DATA_SECTION_KEY = "data"
METADATA_SECTION_KEY = "metadata"
JSON_FIXTURE_EXTENSIONS = (".json",)
YAML_FIXTURE_EXTENSIONS = (".yaml", ".yml")
ADAPTER_CACHE_SIZE = 256
