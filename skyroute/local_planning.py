"""Polar-histogram helpers and tree nodes for the local obstacle-avoidance planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def _zero_vector() -> np.ndarray:
    return np.zeros(3, dtype=float)


@dataclass(eq=False)
class TreeNode:
    """A node of the look-ahead tree: a position reached from the node ``origin``."""

    origin: int = 0
    position: np.ndarray = field(default_factory=_zero_vector)
    velocity: np.ndarray = field(default_factory=_zero_vector)
    total_cost: float = 0.0
    heuristic: float = 0.0
    closed: bool = False
    depth: int = 0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float).copy()
        self.velocity = np.asarray(self.velocity, dtype=float).copy()

    def set_costs(self, heuristic: float, cost: float) -> None:
        """Set the heuristic and the total cost of the node."""
        self.heuristic = heuristic
        self.total_cost = cost


def conic_kernel(radius: int) -> np.ndarray:
    """Return a 1D cone-shaped kernel of length 2*radius+1 whose peak is 1."""
    offsets = np.abs(np.arange(2 * radius + 1) - radius)
    kernel = np.maximum(0.0, 1.0 + radius - offsets).astype(float)
    return kernel / kernel.max()


def pad_polar_matrix(matrix, n_lines_padding: int) -> np.ndarray:
    """Pad a polar histogram matrix by n lines on each side, following its wrapping.

    Rows are elevation and columns azimuth: padding above and below the
    poles is taken from the opposite half of azimuths, mirrored; padding
    left and right wraps around in azimuth.
    """
    matrix = np.asarray(matrix, dtype=float)
    rows, cols = matrix.shape
    n = int(n_lines_padding)
    if cols % 2 > 0:
        raise ValueError("invalid resolution: 180 mod (2 * resolution) must be zero")
    mid = cols // 2

    padded = np.zeros((rows + 2 * n, cols + 2 * n), dtype=float)
    padded[n:n + rows, n:n + cols] = matrix

    # top border
    padded[0:n, n:n + mid] = matrix[0:n, mid:2 * mid][::-1]
    padded[0:n, n + mid:n + 2 * mid] = matrix[0:n, 0:mid][::-1]

    # bottom border
    padded[rows + n:rows + 2 * n, n:n + mid] = matrix[rows - n:rows, mid:2 * mid][::-1]
    padded[rows + n:rows + 2 * n, n + mid:n + 2 * mid] = matrix[rows - n:rows, 0:mid][::-1]

    padded_cols = padded.shape[1]
    # left border
    padded[:, 0:n] = padded[:, padded_cols - 2 * n:padded_cols - n]
    # right border
    padded[:, n + cols:n + cols + n] = padded[:, n:2 * n]
    return padded


def smooth_polar_matrix(matrix, smoothing_radius: int) -> np.ndarray:
    """Return the matrix smoothed with a conic kernel, respecting polar wrapping."""
    matrix = np.asarray(matrix, dtype=float)
    radius = int(smoothing_radius)
    padded = pad_polar_matrix(matrix, radius)
    kernel = conic_kernel(radius)
    width = 2 * radius + 1

    vertical = sliding_window_view(padded, width, axis=0) @ kernel
    return sliding_window_view(vertical, width, axis=1) @ kernel


def _clamp_to_byte(values: np.ndarray) -> np.ndarray:
    # NaN ends up as 255, as min(255, NaN) keeps the 255.
    upper = np.where(values < 255.0, values, 255.0)
    lower = np.where(upper > 0.0, upper, 0.0)
    return lower.astype(np.uint8)


def generate_cost_image(cost_matrix, distance_matrix) -> bytes:
    """Return an RGB8 image: red is distance cost, green the other costs.

    The first image row holds the highest elevation row of the matrices.
    """
    cost = np.asarray(cost_matrix, dtype=float)
    dist = np.asarray(distance_matrix, dtype=float)
    if cost.shape != dist.shape:
        raise ValueError("cost and distance matrices must have the same shape")
    max_val = max(cost.max(), dist.max())
    with np.errstate(divide="ignore", invalid="ignore"):
        red = _clamp_to_byte(255.0 * dist / max_val)
        green = _clamp_to_byte(255.0 * cost / max_val)
    blue = np.zeros_like(red)
    image = np.stack([red, green, blue], axis=-1)[::-1]
    return image.reshape(-1).tobytes()


def color_image_index(e_ind: int, z_ind: int, color: int, grid_length_e: int, grid_length_z: int) -> int:
    """Return the byte index of a colour channel (0 red, 1 green, 2 blue) of a cell."""
    return ((grid_length_e - e_ind - 1) * grid_length_z + z_ind) * 3 + color


def setpoint_from_path(
    path: Sequence,
    path_generation_time: float,
    velocity: float,
    current_time: float,
) -> np.ndarray | None:
    """Return where to be on the path after travelling at velocity since its creation.

    The path runs from its last element backwards to its first. Returns None
    when the path is too short or has already been travelled to its end.
    """
    points = [np.asarray(p, dtype=float) for p in path]
    n = len(points)
    if n < 2:
        return None
    if n == 2:
        return points[0].copy()

    segment = points[n - 3] - points[n - 2]
    distance_left = (current_time - path_generation_time) * velocity
    setpoint = points[n - 2] + (distance_left / np.linalg.norm(segment)) * segment
    i = n - 3
    while i > 0 and distance_left > np.linalg.norm(segment):
        distance_left -= np.linalg.norm(segment)
        segment = points[i - 1] - points[i]
        setpoint = points[i] + (distance_left / np.linalg.norm(segment)) * segment
        i -= 1
    if distance_left < np.linalg.norm(segment):
        return setpoint
    return None