"""Fixture inspection commands for the fixturekit CLI."""

from __future__ import annotations

import argparse
import json
from typing import Any

from core.config import FixtureConfig
from core.errors import FixtureLoadError
from fixtures.fixture_loader import load_fixture, resolve_fixture_path
from fixtures.fixture_store import FixtureStore


def add_keys_command(subparsers: Any) -> None:
    """Register keys subcommand."""
    parser = subparsers.add_parser("keys", help="List the keys defined by a fixture file")
    parser.add_argument("fixture", help="Fixture file, absolute or relative to the fixture root")
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="List metadata keys instead of data keys",
    )


def add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print one raw fixture value as JSON")
    parser.add_argument("fixture", help="Fixture file, absolute or relative to the fixture root")
    parser.add_argument("key", help="Key to print")
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Read the key from the metadata section",
    )


def run_keys_command(config: FixtureConfig, args: argparse.Namespace) -> int:
    """Print fixture keys one per line."""
    store = _load_store(config, args.fixture)
    if store is None:
        return 1
    section = store.metadata if args.metadata else store.data
    for key in section:
        print(key)
    return 0


def run_show_command(config: FixtureConfig, args: argparse.Namespace) -> int:
    """Print the raw value stored under a fixture key."""
    store = _load_store(config, args.fixture)
    if store is None:
        return 1
    section = store.metadata if args.metadata else store.data
    if args.key not in section:
        section_name = "metadata" if args.metadata else "data"
        print(f"fixture_error=Key '{args.key}' is not defined in fixture {section_name}.")
        return 1
    print(json.dumps(section[args.key], indent=2, sort_keys=True, default=str))
    return 0


def _load_store(config: FixtureConfig, fixture_name: str) -> FixtureStore | None:
    try:
        return load_fixture(resolve_fixture_path(fixture_name, config))
    except FixtureLoadError as error:
        print(f"fixture_error={error}")
        return None
