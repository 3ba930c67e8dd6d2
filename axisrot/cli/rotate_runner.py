# axisrot/cli/rotate_runner.py
"""Demonstration CLI: rotate one point about an axis and print the result.

Defaults come from ``axisrot.config.get_settings()``: the point (1, 0, 0)
turned by -2*pi/3 about the (1, 1, 1) direction.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from axisrot.config import LogLevel, Settings, get_settings
from axisrot.core.geometry.angles import deg_to_rad, describe_rotation
from axisrot.core.geometry.rotation import AxisLine, rotate_about_axis
from axisrot.utils.error_tracker import ErrorTracker, error_scope
from axisrot.utils.format import format_column
from axisrot.utils.geometry import Vec3, as_vec3, axial_coordinate, perpendicular_distance
from axisrot.utils.logger import configure, get_logger


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    demo = settings.demo
    parser = argparse.ArgumentParser(
        prog="axisrot",
        description="Rotate a 3D point about an arbitrary axis.",
    )
    parser.add_argument(
        "--point", nargs=3, type=float, metavar=("X", "Y", "Z"),
        default=list(demo.point),
        help="point to rotate (default: %(default)s)",
    )
    parser.add_argument(
        "--axis", nargs=3, type=float, metavar=("X", "Y", "Z"),
        default=list(demo.axis),
        help="axis direction through the origin (default: %(default)s)",
    )
    parser.add_argument(
        "--line", nargs=6, type=float, metavar=("X1", "Y1", "Z1", "X2", "Y2", "Z2"),
        help="axis through two points, oriented from the first; overrides --axis",
    )
    parser.add_argument(
        "--angle", type=float, default=None,
        help=f"rotation angle, radians unless --degrees (default: {demo.angle_rad:.6f} rad)",
    )
    parser.add_argument("--degrees", action="store_true", help="interpret --angle in degrees")
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="print the composed matrix and invariant checks",
    )
    parser.add_argument(
        "--log-level", choices=[lvl.value for lvl in LogLevel],
        default=settings.logging.level.value,
    )
    return parser


def _resolve_angle(args: argparse.Namespace, settings: Settings) -> float:
    if args.angle is None:
        return settings.demo.angle_rad
    return deg_to_rad(args.angle) if args.degrees else args.angle


def _resolve_line(args: argparse.Namespace) -> AxisLine:
    if args.line is not None:
        return AxisLine(p1=as_vec3(args.line[:3], "p1"), p2=as_vec3(args.line[3:], "p2"))
    return AxisLine(p1=as_vec3((0.0, 0.0, 0.0)), p2=as_vec3(args.axis, "axis"))


def _report(point: Vec3, result: Vec3, line: AxisLine, angle: float, settings: Settings) -> None:
    log = get_logger("axisrot.cli")
    precision = settings.output.precision
    tolerance = settings.output.tolerance

    print(describe_rotation(line.matrix(angle), precision=precision))

    d_before = perpendicular_distance(point, line.direction, line.p1)
    d_after = perpendicular_distance(result, line.direction, line.p1)
    h_before = axial_coordinate(point, line.direction, line.p1)
    h_after = axial_coordinate(result, line.direction, line.p1)
    log.tag("CHECK", f"distance to axis {d_before:.{precision}g} -> {d_after:.{precision}g}")
    log.tag("CHECK", f"axial coordinate {h_before:.{precision}g} -> {h_after:.{precision}g}")
    if abs(d_before - d_after) > tolerance or abs(h_before - h_after) > tolerance:
        log.warning(f"Rotation drifted beyond tolerance {tolerance}")


def run(args: argparse.Namespace, settings: Settings) -> Vec3:
    """Rotate the requested point and print it; returns the rotated point."""
    log = get_logger("axisrot.cli")
    point = as_vec3(args.point, "point")
    line = _resolve_line(args)
    angle = _resolve_angle(args, settings)

    if line.is_degenerate:
        log.warning("Axis has zero length; the point is left in place")
    log.tag("ROTATE", f"point={point.tolist()} axis={line.direction.tolist()} angle={angle:.6f} rad")

    if args.line is None:
        result = rotate_about_axis(point, line.direction, angle)
    else:
        result = line.rotate(point, angle)
    print("result:")
    print(format_column(result, precision=settings.output.precision))

    if args.verbose:
        _report(point, result, line, angle, settings)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``axisrot`` console script.

    Returns:
        Exit code (0 for success, 1 on failure)
    """
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    configure(level=args.log_level, file=settings.logging.file)

    tracker = ErrorTracker(context="axisrot.cli")
    try:
        with error_scope("rotate", tracker):
            run(args, settings)
    except Exception:
        tracker.summary()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["build_parser", "main", "run"]
