# axisrot/core/geometry/angles.py
"""Rotation matrix conversions: axis-angle, Euler angles, degrees/radians."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot

from axisrot.utils.format import format_matrix
from axisrot.utils.geometry import vector_length


def deg_to_rad(degrees: float) -> float:
    return math.radians(degrees)


def rad_to_deg(radians: float) -> float:
    return math.degrees(radians)


def axis_angle_from_matrix(R: npt.NDArray[np.float64]) -> tuple[float, npt.NDArray[np.float64]]:
    """Convert rotation matrix to axis-angle representation.

    Args:
        R: 3x3 rotation matrix

    Returns:
        Tuple of (angle_degrees, axis_unit_vector)
    """
    rot = SciRot.from_matrix(R)
    rotvec = rot.as_rotvec()

    angle_rad = vector_length(rotvec)
    angle_deg = rad_to_deg(angle_rad)

    if angle_rad > 1e-12:
        axis = rotvec / angle_rad
    else:
        axis = np.array([0.0, 0.0, 1.0])  # Arbitrary axis for zero rotation

    return angle_deg, axis


def matrix_from_rotvec(axis: npt.ArrayLike, angle: float) -> npt.NDArray[np.float64]:
    """Rodrigues rotation matrix for ``angle`` radians about ``axis``.

    Zero-length axis gives the identity.
    """
    a = np.asarray(axis, dtype=np.float64)
    length = vector_length(a)
    if length == 0.0:
        return np.eye(3, dtype=np.float64)
    return SciRot.from_rotvec(a / length * angle).as_matrix()


def euler_from_matrix(
    R: npt.NDArray[np.float64], seq: str = "xyz", degrees: bool = True
) -> npt.NDArray[np.float64]:
    """Convert rotation matrix to Euler angles.

    Args:
        R: 3x3 rotation matrix
        seq: Euler sequence (e.g., 'xyz', 'zyx')
        degrees: Return angles in degrees if True, radians if False

    Returns:
        Array of Euler angles in specified sequence
    """
    rot = SciRot.from_matrix(R)
    return rot.as_euler(seq, degrees=degrees)


def matrix_from_euler(
    angles: npt.ArrayLike, seq: str = "xyz", degrees: bool = True
) -> npt.NDArray[np.float64]:
    """Convert Euler angles to rotation matrix.

    Args:
        angles: Array of Euler angles
        seq: Euler sequence (e.g., 'xyz', 'zyx')
        degrees: Input angles in degrees if True, radians if False

    Returns:
        3x3 rotation matrix
    """
    rot = SciRot.from_euler(seq, angles, degrees=degrees)
    return rot.as_matrix()


def describe_rotation(R: npt.NDArray[np.float64], precision: int = 6) -> str:
    """Multi-line report of a rotation matrix in several representations."""
    angle_deg, axis = axis_angle_from_matrix(R)
    euler_zyx = euler_from_matrix(R, seq="zyx", degrees=True)
    euler_xyz = euler_from_matrix(R, seq="xyz", degrees=True)

    lines = [
        "matrix:",
        format_matrix(R, precision=precision),
        f"Axis-angle: {angle_deg:.{precision}f} degrees",
        f"Axis: {[round(float(x), precision) for x in axis]}",
        f"Euler ZYX (degrees): {[round(float(x), precision) for x in euler_zyx]}",
        f"Euler XYZ (degrees): {[round(float(x), precision) for x in euler_xyz]}",
    ]
    return "\n".join(lines)


__all__ = [
    "axis_angle_from_matrix",
    "deg_to_rad",
    "describe_rotation",
    "euler_from_matrix",
    "matrix_from_euler",
    "matrix_from_rotvec",
    "rad_to_deg",
]
