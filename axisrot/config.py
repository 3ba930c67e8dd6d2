# axisrot/config.py
"""Centralized configuration for the axisrot toolkit.

Constants, enums and settings dataclasses live here. Runners read their
defaults from ``get_settings()``, which applies ``AXISROT_*`` environment
overrides.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Final

# ============================================================================
# ENV HELPERS
# ============================================================================


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


def _env_int(key: str, default: int) -> int:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(key)
    return int(value) if value is not None else default


def _env_float(key: str, default: float) -> float:
    """Resolve float from environment variable with fallback."""
    value = os.getenv(key)
    return float(value) if value is not None else default


def _env_vec3(key: str, default: tuple[float, float, float]) -> tuple[float, float, float]:
    """Resolve a 3-vector given as ``"x,y,z"`` (or whitespace separated)."""
    value = os.getenv(key)
    if value is None:
        return default
    parts = value.replace(",", " ").split()
    if len(parts) != 3:
        raise ValueError(f"{key} must hold three numbers, got {value!r}")
    x, y, z = (float(p) for p in parts)
    return (x, y, z)


# ============================================================================
# DEMO CONSTANTS
# ============================================================================

TAU: Final[float] = 2.0 * math.pi

DEFAULT_POINT: Final[tuple[float, float, float]] = (1.0, 0.0, 0.0)
DEFAULT_AXIS: Final[tuple[float, float, float]] = (1.0, 1.0, 1.0)
DEFAULT_ANGLE_RAD: Final[float] = -TAU / 3.0

# ============================================================================
# NUMERIC CONSTANTS
# ============================================================================

TOLERANCE: Final[float] = 1e-5
PRINT_PRECISION: Final[int] = 6

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class DemoConfig:
    """Inputs of the demonstration run."""

    point: tuple[float, float, float] = DEFAULT_POINT
    axis: tuple[float, float, float] = DEFAULT_AXIS
    angle_rad: float = DEFAULT_ANGLE_RAD


@dataclass(frozen=True)
class OutputConfig:
    """Console output formatting."""

    precision: int = PRINT_PRECISION
    tolerance: float = TOLERANCE


@dataclass(frozen=True)
class LoggingConfig:
    """Logger level and optional file sink."""

    level: LogLevel = LogLevel.INFO
    file: str | None = None


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main application configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    demo: DemoConfig
    output: OutputConfig
    logging: LoggingConfig


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        AXISROT_POINT: Demo point, "x,y,z"
        AXISROT_AXIS: Demo axis direction, "x,y,z"
        AXISROT_ANGLE: Demo angle in radians
        AXISROT_PRECISION: Printed decimal places
        AXISROT_TOLERANCE: Comparison tolerance
        AXISROT_LOG_LEVEL: Logging level
        AXISROT_LOG_FILE: Optional log file path
    """
    demo = DemoConfig(
        point=_env_vec3("AXISROT_POINT", DEFAULT_POINT),
        axis=_env_vec3("AXISROT_AXIS", DEFAULT_AXIS),
        angle_rad=_env_float("AXISROT_ANGLE", DEFAULT_ANGLE_RAD),
    )

    output = OutputConfig(
        precision=_env_int("AXISROT_PRECISION", PRINT_PRECISION),
        tolerance=_env_float("AXISROT_TOLERANCE", TOLERANCE),
    )

    log_file = os.getenv("AXISROT_LOG_FILE")
    logging = LoggingConfig(
        level=LogLevel(_env_str("AXISROT_LOG_LEVEL", LogLevel.INFO.value).upper()),
        file=log_file or None,
    )

    return Settings(demo=demo, output=output, logging=logging)


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "DemoConfig",
    "OutputConfig",
    "LoggingConfig",
    # Enums
    "LogLevel",
    # Constants
    "TAU",
    "DEFAULT_POINT",
    "DEFAULT_AXIS",
    "DEFAULT_ANGLE_RAD",
    "TOLERANCE",
    "PRINT_PRECISION",
]
