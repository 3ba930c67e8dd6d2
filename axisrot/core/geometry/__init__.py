# axisrot/core/geometry/__init__.py
"""Axis rotations and rotation-matrix conversions."""

from __future__ import annotations

from axisrot.core.geometry.angles import (
    axis_angle_from_matrix,
    deg_to_rad,
    describe_rotation,
    euler_from_matrix,
    matrix_from_euler,
    matrix_from_rotvec,
    rad_to_deg,
)
from axisrot.core.geometry.rotation import (
    AxisLine,
    alignment_matrices,
    axis_rotation_matrix,
    rotate_about_axis,
    rotate_about_line,
    rotation_x,
    rotation_y,
    rotation_z,
)

__all__ = [
    "AxisLine",
    "alignment_matrices",
    "axis_angle_from_matrix",
    "axis_rotation_matrix",
    "deg_to_rad",
    "describe_rotation",
    "euler_from_matrix",
    "matrix_from_euler",
    "matrix_from_rotvec",
    "rad_to_deg",
    "rotate_about_axis",
    "rotate_about_line",
    "rotation_x",
    "rotation_y",
    "rotation_z",
]
