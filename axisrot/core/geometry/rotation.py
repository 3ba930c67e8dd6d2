# axisrot/core/geometry/rotation.py
"""Rotation of a point about an arbitrary axis by change of basis.

The axis is first turned onto +Z by a rotation about X followed by a
rotation about Y. The requested angle is then applied about Z and the
alignment is undone::

    M = Rx^T @ Ry^T @ Rz(angle) @ Ry @ Rx

Rx and Ry are proper rotations, so their transposes are their exact inverses
and M is the right-handed rotation by ``angle`` about the axis direction.

Non-finite inputs are not rejected: NaN or inf propagate into the result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from axisrot.utils.geometry import Vec3, as_vec3, vector_length
from axisrot.utils.logger import get_logger

LOGGER = get_logger(__name__)

Matrix3 = npt.NDArray[np.float64]


def rotation_x(sin_theta: float, cos_theta: float) -> Matrix3:
    """Rotation about X given the sine and cosine of the angle."""
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, cos_theta, -sin_theta],
            [0.0, sin_theta, cos_theta],
        ],
        dtype=np.float64,
    )


def rotation_y(sin_theta: float, cos_theta: float) -> Matrix3:
    """Rotation about Y given the sine and cosine of the angle."""
    return np.array(
        [
            [cos_theta, 0.0, sin_theta],
            [0.0, 1.0, 0.0],
            [-sin_theta, 0.0, cos_theta],
        ],
        dtype=np.float64,
    )


def rotation_z(angle: float) -> Matrix3:
    """Rotation about Z by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def alignment_matrices(axis: npt.ArrayLike) -> tuple[Matrix3, Matrix3]:
    """Return ``(Rx, Ry)`` such that ``Ry @ Rx @ axis`` lies on +Z.

    Args:
        axis: non-zero 3-vector

    Raises:
        ValueError: if the axis has zero length
    """
    a = as_vec3(axis, "axis")
    axis_length = vector_length(a)
    if axis_length == 0.0:
        raise ValueError("axis must have non-zero length to be aligned")

    # Project onto the YZ plane and turn the projection onto +Z about X.
    # sin = y/|p|, cos = z/|p| puts the angle on the correct side of Z.
    yz_length = math.hypot(a[1], a[2])
    if yz_length != 0.0:
        rot_x = rotation_x(a[1] / yz_length, a[2] / yz_length)
    else:
        LOGGER.debug("Axis {} already lies on X", a.tolist())
        rot_x = np.eye(3, dtype=np.float64)

    a = rot_x @ a

    # Now in the XZ plane. Positive rotation about Y carries +Z towards +X,
    # so x enters with the opposite sign.
    rot_y = rotation_y(-a[0] / axis_length, a[2] / axis_length)
    return rot_x, rot_y


def axis_rotation_matrix(axis: npt.ArrayLike, angle: float) -> Matrix3:
    """Composed 3x3 rotation by ``angle`` radians about ``axis``.

    A zero-length axis yields the identity.
    """
    a = as_vec3(axis, "axis")
    if vector_length(a) == 0.0:
        LOGGER.debug("Degenerate axis, rotation is identity")
        return np.eye(3, dtype=np.float64)

    rot_x, rot_y = alignment_matrices(a)
    rot_z = rotation_z(float(angle))
    return rot_x.T @ rot_y.T @ rot_z @ rot_y @ rot_x


def rotate_about_axis(point: npt.ArrayLike, axis: npt.ArrayLike, angle: float) -> Vec3:
    """Rotate ``point`` about the line through the origin along ``axis``.

    Args:
        point: 3-vector to rotate
        axis: direction of the rotation axis; need not be normalised
        angle: radians, positive by the right-hand rule about ``axis``

    Returns:
        New rotated point. For a zero-length axis, a copy of ``point``.
    """
    p = as_vec3(point, "point")
    a = as_vec3(axis, "axis")
    if vector_length(a) == 0.0:
        LOGGER.debug("Degenerate axis, returning point unchanged")
        return p
    return axis_rotation_matrix(a, angle) @ p


def rotate_about_line(
    point: npt.ArrayLike, p1: npt.ArrayLike, p2: npt.ArrayLike, angle: float
) -> Vec3:
    """Rotate ``point`` about the oriented line from ``p1`` to ``p2``.

    The axis direction is ``p2 - p1``; ``p1 == p2`` leaves the point in place.
    """
    origin = as_vec3(p1, "p1")
    direction = as_vec3(p2, "p2") - origin
    shifted = as_vec3(point, "point") - origin
    return rotate_about_axis(shifted, direction, angle) + origin


@dataclass(frozen=True)
class AxisLine:
    """Rotation axis through two points, oriented from ``p1`` to ``p2``."""

    p1: Vec3
    p2: Vec3

    def __post_init__(self) -> None:
        """Store read-only float64 copies."""
        for name in ("p1", "p2"):
            vec = as_vec3(getattr(self, name), name)
            vec.setflags(write=False)
            object.__setattr__(self, name, vec)

    @property
    def direction(self) -> Vec3:
        return self.p2 - self.p1

    @property
    def is_degenerate(self) -> bool:
        return vector_length(self.direction) == 0.0

    def rotate(self, point: npt.ArrayLike, angle: float) -> Vec3:
        return rotate_about_line(point, self.p1, self.p2, angle)

    def matrix(self, angle: float) -> Matrix3:
        """Rotation part of the motion; the translation is about ``p1``."""
        return axis_rotation_matrix(self.direction, angle)


__all__ = [
    "AxisLine",
    "Matrix3",
    "alignment_matrices",
    "axis_rotation_matrix",
    "rotate_about_axis",
    "rotate_about_line",
    "rotation_x",
    "rotation_y",
    "rotation_z",
]
