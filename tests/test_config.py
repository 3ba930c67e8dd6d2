# tests/test_config.py
"""Tests for centralized configuration module."""

from __future__ import annotations

import dataclasses
import math

import pytest

from axisrot.config import (
    DEFAULT_ANGLE_RAD,
    DEFAULT_AXIS,
    DEFAULT_POINT,
    PRINT_PRECISION,
    TAU,
    TOLERANCE,
    LogLevel,
    Settings,
    get_settings,
)


def test_constants_are_defined() -> None:
    """Demo defaults reproduce the worked example."""
    assert DEFAULT_POINT == (1.0, 0.0, 0.0)
    assert DEFAULT_AXIS == (1.0, 1.0, 1.0)
    assert DEFAULT_ANGLE_RAD == pytest.approx(-2.0 * math.pi / 3.0)
    assert TAU == pytest.approx(2.0 * math.pi)
    assert isinstance(PRINT_PRECISION, int)
    assert TOLERANCE == 1e-5


def test_get_settings_defaults() -> None:
    """Without environment overrides every section uses the constants."""
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert settings.demo.point == DEFAULT_POINT
    assert settings.demo.axis == DEFAULT_AXIS
    assert settings.demo.angle_rad == DEFAULT_ANGLE_RAD
    assert settings.output.precision == PRINT_PRECISION
    assert settings.output.tolerance == TOLERANCE
    assert settings.logging.level is LogLevel.INFO
    assert settings.logging.file is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """AXISROT_* variables replace the defaults."""
    monkeypatch.setenv("AXISROT_POINT", "1, 2, 3")
    monkeypatch.setenv("AXISROT_AXIS", "0 0 -1")
    monkeypatch.setenv("AXISROT_ANGLE", "0.5")
    monkeypatch.setenv("AXISROT_PRECISION", "3")
    monkeypatch.setenv("AXISROT_TOLERANCE", "1e-8")
    monkeypatch.setenv("AXISROT_LOG_LEVEL", "debug")
    monkeypatch.setenv("AXISROT_LOG_FILE", "/tmp/axisrot.log")

    settings = get_settings()
    assert settings.demo.point == (1.0, 2.0, 3.0)
    assert settings.demo.axis == (0.0, 0.0, -1.0)
    assert settings.demo.angle_rad == 0.5
    assert settings.output.precision == 3
    assert settings.output.tolerance == 1e-8
    assert settings.logging.level is LogLevel.DEBUG
    assert settings.logging.file == "/tmp/axisrot.log"


def test_malformed_vector_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AXISROT_AXIS", "1,2")
    with pytest.raises(ValueError, match="AXISROT_AXIS"):
        get_settings()


def test_settings_are_frozen() -> None:
    settings = get_settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.demo = None  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.output.precision = 1  # type: ignore[misc]
