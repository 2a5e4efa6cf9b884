"""Fixturekit CLI entry points.

This module exposes commands for inspecting fixture files.
It maps argparse commands onto loader and store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.inspect_commands import (
    add_keys_command,
    add_show_command,
    run_keys_command,
    run_show_command,
)
from core.config import FixtureConfig
from core.errors import FixtureError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="fixturekit", description="Fixture inspection CLI")
    parser.add_argument(
        "--fixture-root",
        help="Override FIXTUREKIT_FIXTURE_ROOT for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_keys_command(subparsers)
    add_show_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the fixturekit CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.fixture_root)
    except FixtureError as error:
        print(f"fixture_error={error}")
        return 1
    configure_logging(config.log_level)
    if args.command == "keys":
        return run_keys_command(config, args)
    if args.command == "show":
        return run_show_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(fixture_root: str | None) -> FixtureConfig:
    """Build runtime config with optional fixture-root override.

    Args:
        fixture_root: Optional override path.

    Returns:
        Validated config.
    """
    config = FixtureConfig.from_env()
    if fixture_root:
        config = replace(config, fixture_root=Path(fixture_root).expanduser().resolve())
    return config
