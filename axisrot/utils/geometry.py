# utils/geometry.py
"""Value-type coercion and axis-line measurements shared across packages."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

Vec3 = npt.NDArray[np.float64]


def as_vec3(values: Iterable[float] | npt.ArrayLike, name: str = "vector") -> Vec3:
    """Return a fresh float64 array of shape (3,).

    Raises:
        ValueError: if ``values`` does not hold exactly three numbers
    """
    try:
        vec = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be three real numbers, got {values!r}") from exc
    if vec.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {vec.shape}")
    return vec


def vector_length(vec: npt.ArrayLike) -> float:
    """Euclidean length, scaled so finite vectors never under- or overflow."""
    return math.hypot(*(float(v) for v in np.asarray(vec, dtype=np.float64).reshape(-1)))


def is_degenerate(axis: npt.ArrayLike) -> bool:
    """True when the axis has exactly zero length and so carries no orientation."""
    return vector_length(as_vec3(axis, "axis")) == 0.0


def axial_coordinate(
    point: npt.ArrayLike, axis: npt.ArrayLike, origin: npt.ArrayLike = (0.0, 0.0, 0.0)
) -> float:
    """Signed position of ``point`` along the line through ``origin`` along ``axis``."""
    a = as_vec3(axis, "axis")
    length = vector_length(a)
    if length == 0.0:
        return 0.0
    offset = as_vec3(point, "point") - as_vec3(origin, "origin")
    return float(np.dot(offset, a / length))


def perpendicular_distance(
    point: npt.ArrayLike, axis: npt.ArrayLike, origin: npt.ArrayLike = (0.0, 0.0, 0.0)
) -> float:
    """Distance from ``point`` to the line through ``origin`` along ``axis``.

    A zero axis has no line; the distance to ``origin`` is returned instead.
    """
    a = as_vec3(axis, "axis")
    offset = as_vec3(point, "point") - as_vec3(origin, "origin")
    length = vector_length(a)
    if length == 0.0:
        return vector_length(offset)
    return vector_length(np.cross(offset, a / length))


__all__ = [
    "Vec3",
    "as_vec3",
    "axial_coordinate",
    "is_degenerate",
    "perpendicular_distance",
    "vector_length",
]
