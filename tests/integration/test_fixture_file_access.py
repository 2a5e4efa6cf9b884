"""Integration tests for typed access to fixture files on disk."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from core.errors import FixtureAdaptationError
from fixturekit import FixtureConfig, load_fixture, resolve_fixture_path
from tests.fixture_paths import fixtures_root


class CreatePlatform(BaseModel):
    name: str
    region: str


@dataclass(frozen=True)
class Widget:
    id: int
    label: str


def _config() -> FixtureConfig:
    return FixtureConfig(fixture_root=fixtures_root(), log_level="INFO")


def test_yaml_fixture_supports_typed_reads() -> None:
    """Loaded YAML fixtures should serve typed single and multi reads."""
    store = load_fixture(resolve_fixture_path("store/create_platform.yaml", _config()))

    platform = store.get_or_raise(CreatePlatform)
    widgets = store.get_multiple_or_raise(Widget, "widgets")

    assert platform == CreatePlatform(name="orbit", region="eu-west-1")
    assert widgets == [Widget(id=1, label="first"), Widget(id=2, label="second")]
    assert store.get_multiple(Widget) == [Widget(id=7, label="single")]
    assert store.get_metadata("version") == "3"


def test_json_fixture_strict_and_lenient_reads_diverge() -> None:
    """A broken element should be dropped leniently and rejected strictly."""
    store = load_fixture(resolve_fixture_path("store/sectioned.json", _config()))

    assert store.get_multiple(Widget, "widgets") == [Widget(id=4, label="four")]
    with pytest.raises(FixtureAdaptationError):
        store.get_multiple_or_raise(Widget, "widgets")
    assert store.get_metadata("version", int) == 2
    assert store.get_metadata("stable") == "true"


def test_missing_key_is_error_only_for_single_strict_read() -> None:
    """Strict single reads raise on missing keys while strict multi reads do not."""
    store = load_fixture(resolve_fixture_path("store/flat_inputs.json", _config()))

    with pytest.raises(FixtureAdaptationError):
        store.get_or_raise(Widget, "absent")
    assert store.get_multiple_or_raise(Widget, "absent") == []
