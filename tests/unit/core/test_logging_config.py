"""Unit tests for structured logging configuration."""

from __future__ import annotations

from typing import Iterator

import pytest
import structlog

from core.logging_config import configure_logging, get_logger


@pytest.fixture
def unconfigured_logging() -> Iterator[None]:
    """Reset structlog so get_logger configures itself, then restore defaults."""
    structlog.reset_defaults()
    yield
    configure_logging()


@pytest.mark.usefixtures("unconfigured_logging")
def test_get_logger_applies_level_from_environment(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Lazy configuration should honour FIXTUREKIT_LOG_LEVEL."""
    monkeypatch.setenv("FIXTUREKIT_LOG_LEVEL", "DEBUG")

    get_logger("tests.logging").debug("debug_event", answer=42)
    output = capsys.readouterr().err

    assert "debug_event" in output


@pytest.mark.usefixtures("unconfigured_logging")
def test_get_logger_filters_below_environment_level(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Lazy configuration should drop events below the configured level."""
    monkeypatch.setenv("FIXTUREKIT_LOG_LEVEL", "ERROR")

    get_logger("tests.logging").warning("warning_event")
    output = capsys.readouterr().err

    assert "warning_event" not in output


@pytest.mark.usefixtures("unconfigured_logging")
def test_get_logger_warns_for_invalid_level(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An invalid level should fall back to INFO and report the problem."""
    monkeypatch.setenv("FIXTUREKIT_LOG_LEVEL", "chatty")

    get_logger("tests.logging").info("info_event")
    output = capsys.readouterr().err

    assert "invalid_log_level" in output and "info_event" in output
