from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from math import cos, sin, pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from curvedtext.model.geometry_primitives import ArcPath, Point, Side, SweepDirection


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def polar_to_cartesian(center: Point, radius: float, angle: float) -> Point:
    """
    Map a polar coordinate around `center` to a canvas point.

    Args:
        center: Center of the ring.
        radius: Distance from the center.
        angle: Angle in degrees. 0 points to 3 o'clock and positive angles
            turn clockwise on the y-down canvas.

    Returns:
        The point on the circle of `radius` around `center`.
    """
    angle_rad = deg2rad(angle)
    return Point(
        x=center.x + radius * cos(angle_rad),
        y=center.y + radius * sin(angle_rad),
    )


def get_arc_direction(side: Side | str) -> SweepDirection:
    """Left labels (elapsed) run counter-clockwise, right labels (remaining) clockwise."""
    side = Side(side)
    match side:
        case Side.LEFT:
            return SweepDirection.COUNTER_CLOCKWISE
        case Side.RIGHT:
            return SweepDirection.CLOCKWISE
        case _:
            assert_never(side)


def arc_sweep_angle(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """
    Angular span in degrees travelled from `start_angle` to `end_angle`
    in the requested direction. Always within [0, 360).
    """
    if clockwise:
        return (end_angle - start_angle) % 360
    return (start_angle - end_angle) % 360


def build_arc_path(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    clockwise: bool
) -> ArcPath:
    """
    Build the arc from `start_angle` to `end_angle` around `center`.

    The large-arc flag is set when the span travelled in the sweep
    direction exceeds half a circle.
    """
    sweep = SweepDirection(int(bool(clockwise)))
    return ArcPath(
        start=polar_to_cartesian(center, radius, start_angle),
        end=polar_to_cartesian(center, radius, end_angle),
        radius=radius,
        large_arc=arc_sweep_angle(start_angle, end_angle, bool(sweep)) > 180,
        sweep=sweep,
    )


def generate_arc_path(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    clockwise: bool
) -> str:
    """
    Generate the arc path descriptor a renderer draws curved text along.

    Args:
        center: Center of the ring.
        radius: Radius of the arc.
        start_angle: Start angle in degrees.
        end_angle: End angle in degrees.
        clockwise: Sweep direction, a bool or a `SweepDirection`.

    Returns:
        A descriptor of the form ``M sx sy A r r 0 large sweep ex ey``.
    """
    return build_arc_path(center, radius, start_angle, end_angle, clockwise).to_descriptor()


def arc_points(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    *,
    clockwise: bool = False,
    n_points: int = 100
    ) -> npt.NDArray[np.float64]:
    """
    Generate points along the same arc `generate_arc_path` describes.

    Args:
        center: Circle center.
        radius: Circle radius.
        start_angle: Start angle in degrees.
        end_angle: End angle in degrees.
        clockwise: If True, walk the arc clockwise; otherwise counter-clockwise.
        n_points: Number of points to generate along the arc (including endpoints).

    Returns:
        Array of shape (n_points, 2) containing the (x, y) coordinates of the points along the arc.
    """
    span = arc_sweep_angle(start_angle, end_angle, clockwise)
    if not clockwise:
        span = -span

    angles = np.deg2rad(np.linspace(start_angle, start_angle + span, n_points))

    x = center.x + radius * np.cos(angles)
    y = center.y + radius * np.sin(angles)

    return np.column_stack((x, y))
