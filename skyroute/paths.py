"""Poses, colours and measurements over paths made of poses."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Sequence

from skyroute.geometry import Point, distance


@dataclass(frozen=True)
class Quaternion:
    """An orientation as a unit quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Pose:
    """A position together with an orientation."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


def spectral_color(hue: float, alpha: float = 1.0) -> Color:
    """Return a spectral colour for hue in [0, 1]."""
    return Color(
        r=max(0.0, 2 * hue - 1),
        g=1.0 - 2.0 * abs(hue - 0.5),
        b=max(0.0, 1.0 - 2 * hue),
        a=alpha,
    )


def has_same_yaw_and_altitude(pose1: Pose, pose2: Pose) -> bool:
    """Return True if both poses share altitude and yaw orientation."""
    return (
        pose1.orientation.z == pose2.orientation.z
        and pose1.orientation.w == pose2.orientation.w
        and pose1.position.z == pose2.position.z
    )


def path_length(poses: Sequence[Pose]) -> float:
    """Return the total length of the polyline through the poses."""
    return sum(distance(a.position, b.position) for a, b in pairwise(poses))


def filter_path_corners(poses: Sequence[Pose]) -> list[Pose]:
    """Return the first, last and every pose where the direction changes."""
    if not poses:
        return []
    corners = [poses[0]]
    for last, curr, nxt in zip(poses, poses[1:], poses[2:]):
        lp, cp, np_ = last.position, curr.position, nxt.position
        same_x = (np_.x - cp.x) == (cp.x - lp.x)
        same_y = (np_.y - cp.y) == (cp.y - lp.y)
        same_z = (np_.z - cp.z) == (cp.z - lp.z)
        if not (same_x and same_y and same_z):
            corners.append(curr)
    corners.append(poses[-1])
    return corners


def path_kinetic_energy(poses: Sequence[Pose]) -> float:
    """Return the summed change in squared velocity along the path."""
    if len(poses) < 3:
        return 0.0
    velocities = [
        (b.position.x - a.position.x, b.position.y - a.position.y, b.position.z - a.position.z)
        for a, b in pairwise(poses)
    ]
    total = 0.0
    for prev, curr in pairwise(velocities):
        total += sum(abs(c * c - p * p) for p, c in zip(prev, curr))
    return total


def path_energy(poses: Sequence[Pose], up_penalty: float) -> float:
    """Return path length plus a penalty for every metre of climb."""
    total = 0.0
    for a, b in pairwise(poses):
        total += distance(a.position, b.position)
        total += max(0.0, up_penalty * (b.position.z - a.position.z))
    return total