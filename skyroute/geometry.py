"""Basic 3D point arithmetic and numeric helpers used by the planners."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An immutable point (or vector) in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point) -> Point:
        return add_points(self, other)

    def __sub__(self, other: Point) -> Point:
        return subtract_points(self, other)

    def __mul__(self, scalar: float) -> Point:
        return scale_point(self, scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


def squared(x: float) -> float:
    """Return x multiplied by itself."""
    return x * x


def interpolate(start: float, end: float, ratio: float) -> float:
    """Return the value a fraction ``ratio`` of the way from start to end."""
    return start + (end - start) * ratio


def interpolate_points(p1, p2, ratio: float) -> Point:
    """Return the point between p1 (ratio 0) and p2 (ratio 1)."""
    return Point(
        interpolate(p1.x, p2.x, ratio),
        interpolate(p1.y, p2.y, ratio),
        interpolate(p1.z, p2.z, ratio),
    )


def middle_point(p1, p2) -> Point:
    """Return the midpoint of the segment between p1 and p2."""
    return interpolate_points(p1, p2, 0.5)


def norm(x: float, y: float, z: float) -> float:
    """Return the Euclidean length of the vector (x, y, z)."""
    return math.sqrt(squared(x) + squared(y) + squared(z))


def point_norm(p) -> float:
    """Return the Euclidean length of a point treated as a vector."""
    return norm(p.x, p.y, p.z)


def add_points(p1, p2) -> Point:
    """Return the component-wise sum of two points."""
    return Point(p1.x + p2.x, p1.y + p2.y, p1.z + p2.z)


def subtract_points(p1, p2) -> Point:
    """Return the component-wise difference p1 - p2."""
    return Point(p1.x - p2.x, p1.y - p2.y, p1.z - p2.z)


def scale_point(point, scalar: float) -> Point:
    """Return the point multiplied component-wise by a scalar."""
    return Point(scalar * point.x, scalar * point.y, scalar * point.z)


def distance(p1, p2) -> float:
    """Return the Euclidean distance between two points."""
    return norm(p2.x - p1.x, p2.y - p1.y, p2.z - p1.z)


def angle_to_range(angle: float) -> float:
    """Wrap an angle in radians into the range [-pi, pi]."""
    angle += math.pi
    angle -= (2 * math.pi) * math.floor(angle / (2 * math.pi))
    angle -= math.pi
    return angle


def posterior(p: float, prior: float) -> float:
    """Combine two independent probability estimates of the same event."""
    prob_obstacle = p * prior
    prob_free = (1 - p) * (1 - prior)
    return prob_obstacle / (prob_obstacle + prob_free + 0.0001)