# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from axisrot.utils.logger import configure

_ENV_KEYS = (
    "AXISROT_POINT",
    "AXISROT_AXIS",
    "AXISROT_ANGLE",
    "AXISROT_PRECISION",
    "AXISROT_TOLERANCE",
    "AXISROT_LOG_LEVEL",
    "AXISROT_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without AXISROT_* overrides from the outer shell."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the default console-only logger after each test."""
    yield
    configure(level="INFO", file=None)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for randomized property checks."""
    return np.random.default_rng(20240917)


@pytest.fixture
def worked_example() -> dict:
    """Point (1, 0, 0) about the (1, 1, 1) direction."""
    return {
        "point": np.array([1.0, 0.0, 0.0]),
        "axis": np.array([1.0, 1.0, 1.0]),
    }
