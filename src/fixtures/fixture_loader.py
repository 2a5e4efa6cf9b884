"""Fixture file loading.

This module reads JSON or YAML fixture files into a ``FixtureStore``.
A file either splits its content into ``data`` and ``metadata`` sections
or is treated as one flat ``data`` mapping.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.config import FixtureConfig
from core.constants import (
    DATA_SECTION_KEY,
    JSON_FIXTURE_EXTENSIONS,
    METADATA_SECTION_KEY,
    YAML_FIXTURE_EXTENSIONS,
)
from core.errors import FixtureLoadError
from core.logging_config import get_logger
from fixtures.fixture_store import FixtureStore

_LOGGER = get_logger(__name__)
_SECTION_KEYS = frozenset({DATA_SECTION_KEY, METADATA_SECTION_KEY})


def resolve_fixture_path(name: str, config: FixtureConfig) -> Path:
    """Resolve a fixture name against the configured fixture root.

    Args:
        name: Absolute path, or path relative to the fixture root.
        config: Runtime configuration.

    Returns:
        Absolute fixture path.
    """
    candidate = Path(name).expanduser()
    if candidate.is_absolute():
        return candidate
    return (config.fixture_root / candidate).resolve()


def load_fixture(fixture_path: str | Path) -> FixtureStore:
    """Load a fixture file from disk.

    Args:
        fixture_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Store populated with the file's data and metadata.

    Raises:
        FixtureLoadError: If the file is missing, malformed or not a mapping.
    """
    fixture_file = Path(fixture_path).expanduser().resolve()
    payload = _load_payload(fixture_file)
    root_mapping = _expect_mapping(payload, f"fixture root in {fixture_file.name}")
    if root_mapping and set(root_mapping) <= _SECTION_KEYS:
        data = _optional_section(root_mapping, DATA_SECTION_KEY, fixture_file)
        metadata = _optional_section(root_mapping, METADATA_SECTION_KEY, fixture_file)
    else:
        data = root_mapping
        metadata = {}
    store = FixtureStore.from_mappings(data=data, metadata=metadata)
    _LOGGER.info(
        "fixture_loaded",
        fixture_path=str(fixture_file),
        data_keys=len(store.data),
        metadata_keys=len(store.metadata),
    )
    return store


def _load_payload(fixture_file: Path) -> object:
    suffix = fixture_file.suffix.lower()
    if suffix not in JSON_FIXTURE_EXTENSIONS + YAML_FIXTURE_EXTENSIONS:
        supported_rows = ", ".join(JSON_FIXTURE_EXTENSIONS + YAML_FIXTURE_EXTENSIONS)
        raise FixtureLoadError(
            f"Unsupported fixture file extension '{suffix}' for {fixture_file}. "
            f"Use one of: {supported_rows}."
        )
    if not fixture_file.exists():
        raise FixtureLoadError(
            f"Fixture file does not exist at {fixture_file}. Provide a valid fixture path."
        )
    try:
        raw_text = fixture_file.read_text(encoding="utf-8")
    except OSError as error:
        raise FixtureLoadError(
            f"Failed to read fixture at {fixture_file}: {error}. Check file permissions and retry."
        ) from error
    try:
        if suffix in JSON_FIXTURE_EXTENSIONS:
            payload = cast(object, json.loads(raw_text)) if raw_text.strip() else None
        else:
            payload = cast(object, yaml.safe_load(raw_text))
    except (json.JSONDecodeError, yaml.YAMLError) as error:
        raise FixtureLoadError(
            f"Failed to parse fixture at {fixture_file}: {error}. Fix the file syntax and retry."
        ) from error
    if payload is None:
        raise FixtureLoadError(f"Fixture at {fixture_file} is empty. Define at least one entry.")
    return payload


def _expect_mapping(value: object, context: str) -> dict[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise FixtureLoadError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise FixtureLoadError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _optional_section(
    root_mapping: Mapping[str, object],
    section_key: str,
    fixture_file: Path,
) -> dict[str, object]:
    raw_section = root_mapping.get(section_key)
    if raw_section is None:
        return {}
    return _expect_mapping(raw_section, f"'{section_key}' section in {fixture_file.name}")
