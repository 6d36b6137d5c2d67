"""Quadratic Bezier curves for smoothing and timing trajectories."""

from __future__ import annotations

import math
from dataclasses import dataclass

from skyroute.geometry import Point, distance, interpolate_points, middle_point


@dataclass(frozen=True)
class BezierSegment:
    """A quadratic Bezier segment with its start, control and end points."""

    start: Point
    ctrl: Point
    end: Point
    duration: float


def quadratic_bezier(p0: float, p1: float, p2: float, t: float) -> float:
    """Return the value of the quadratic Bezier curve at t (0 <= t <= 1)."""
    return ((1 - t) * (1 - t) * p0) + 2 * ((1 - t) * t * p1) + (t * t * p2)


def quadratic_bezier_acc(p0: float, p1: float, p2: float, duration: float = 1.0) -> float:
    """Return the (constant) second derivative of the quadratic Bezier curve."""
    return 2 * (p2 - 2 * p1 + p0) / duration * duration


def three_point_bezier(p0, p1, p2, num_steps: int = 10) -> list[Point]:
    """Return num_steps + 1 points along the curve from p0 to p2 with control p1."""
    curve = []
    for i in range(num_steps + 1):
        t = i / num_steps
        curve.append(
            Point(
                quadratic_bezier(p0.x, p1.x, p2.x, t),
                quadratic_bezier(p0.y, p1.y, p2.y, t),
                quadratic_bezier(p0.z, p1.z, p2.z, t),
            )
        )
    return curve


def bezier_from_two_points(start, end, acc: float, max_vel: float) -> list[BezierSegment]:
    """Return accelerate, cruise and decelerate segments from start to end."""
    total_dist = distance(start, end)

    acc_duration = max_vel / acc
    acc_dist = acc_duration * max_vel / 2
    # The acceleration phase cannot be more than half of the trajectory.
    acc_part = 0.5 if total_dist == 0 else min(0.5, acc_dist / total_dist)

    middle = middle_point(start, end)
    max_vel_point = interpolate_points(start, end, acc_part)
    decel_point = interpolate_points(end, start, acc_part)
    max_vel_duration = distance(max_vel_point, decel_point) / max_vel

    start = Point(start.x, start.y, start.z)
    end = Point(end.x, end.y, end.z)
    return [
        BezierSegment(start, start, max_vel_point, acc_duration),
        BezierSegment(max_vel_point, middle, decel_point, max_vel_duration),
        BezierSegment(decel_point, end, end, acc_duration),
    ]


def bezier_from_two_speeds(start, end, start_speed: float, end_speed: float) -> BezierSegment:
    """Return a segment whose control point matches the start and end speeds."""
    avg_speed = (start_speed + end_speed) / 2.0
    duration = distance(start, end) / avg_speed
    c = start_speed / (start_speed + end_speed)
    ctrl = interpolate_points(start, end, c)
    return BezierSegment(Point(start.x, start.y, start.z), ctrl, Point(end.x, end.y, end.z), duration)


def get_duration(p0, p1, acc: float) -> float:
    """Return the time to go from p0 to p1 at constant acceleration from rest."""
    return math.sqrt(2 * distance(p0, p1) / acc)


def get_acceleration_magnitude(p0, p1, p2, duration: float) -> float:
    """Return the magnitude of the acceleration of the Bezier curve."""
    dx = quadratic_bezier_acc(p0.x, p1.x, p2.x)
    dy = quadratic_bezier_acc(p0.y, p1.y, p2.y)
    dz = quadratic_bezier_acc(p0.z, p1.z, p2.z)
    return math.sqrt(dx * dx + dy * dy + dz * dz) / duration * duration