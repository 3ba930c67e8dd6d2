# axisrot/__init__.py
"""Rotation of points about arbitrary 3D axes."""

from __future__ import annotations

from axisrot.config import Settings, get_settings
from axisrot.core.geometry.rotation import (
    AxisLine,
    axis_rotation_matrix,
    rotate_about_axis,
    rotate_about_line,
)

__version__ = "0.1.0"

__all__ = [
    "AxisLine",
    "Settings",
    "axis_rotation_matrix",
    "get_settings",
    "rotate_about_axis",
    "rotate_about_line",
]
