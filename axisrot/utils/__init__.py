# utils/__init__.py
"""Utility package re-exporting shared helpers for axisrot."""

from axisrot.utils.error_tracker import ErrorTracker, error_scope
from axisrot.utils.format import format_column, format_matrix, numpy_print_options
from axisrot.utils.geometry import (
    Vec3,
    as_vec3,
    axial_coordinate,
    is_degenerate,
    perpendicular_distance,
    vector_length,
)
from axisrot.utils.logger import configure, get_logger

__all__ = [
    "ErrorTracker",
    "Vec3",
    "as_vec3",
    "axial_coordinate",
    "configure",
    "error_scope",
    "format_column",
    "format_matrix",
    "get_logger",
    "is_degenerate",
    "numpy_print_options",
    "perpendicular_distance",
    "vector_length",
]
