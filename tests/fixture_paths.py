"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture file path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture file path.
    """
    return fixtures_root() / relative_path


def fixtures_root() -> Path:
    """Return the absolute tests/fixtures directory."""
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures"
