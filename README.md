# skyroute

Building blocks for planning the flight path of an aerial vehicle: 3D
point arithmetic, quadratic Bezier curves, measurements over paths of
poses, a generic A* search with path post-processing, and the
polar-histogram matrix tools used by a local obstacle-avoidance planner.

## Modules

### `skyroute.geometry`

- `Point`: an immutable `(x, y, z)` dataclass supporting `+`, `-`,
  multiplication by a scalar and unpacking.
- `squared`, `norm(x, y, z)`, `point_norm(p)`, `distance(p1, p2)`.
- `interpolate(start, end, ratio)` for numbers and
  `interpolate_points(p1, p2, ratio)` / `middle_point(p1, p2)` for points.
- `add_points`, `subtract_points`, `scale_point`.
- `angle_to_range(angle)`: wraps an angle in radians into `[-pi, pi]`.
- `posterior(p, prior)`: combines two independent probability estimates
  of the same event.

The point functions accept any object with `x`, `y` and `z` attributes
and return a `Point`.

### `skyroute.bezier`

- `quadratic_bezier(p0, p1, p2, t)` and `quadratic_bezier_acc(...)` on
  scalar coordinates.
- `three_point_bezier(p0, p1, p2, num_steps=10)`: `num_steps + 1` points
  along the curve from `p0` to `p2` with control point `p1`.
- `BezierSegment`: a frozen dataclass with `start`, `ctrl`, `end` and
  `duration`.
- `bezier_from_two_points(start, end, acc, max_vel)`: three segments
  (accelerate, cruise at `max_vel`, decelerate to a stop).
- `bezier_from_two_speeds(start, end, start_speed, end_speed)`: one
  segment whose control point and duration match the two speeds.
- `get_duration(p0, p1, acc)` and
  `get_acceleration_magnitude(p0, p1, p2, duration)`.

### `skyroute.paths`

- `Quaternion`, `Pose` (a `Point` position and a `Quaternion`
  orientation) and `Color` (RGBA) dataclasses.
- `spectral_color(hue, alpha=1.0)`: red at hue 0 through green to blue
  at hue 1... more precisely, blue at 0, green at 0.5 and red at 1.
- `has_same_yaw_and_altitude(pose1, pose2)`.
- `path_length(poses)`, `path_energy(poses, up_penalty)` (length plus a
  penalty per unit of climb) and `path_kinetic_energy(poses)`.
- `filter_path_corners(poses)`: keeps the first and last pose and every
  pose where the step between poses changes.

### `skyroute.search`

- `Node(cell, parent)`: a hashable search state; cells can be any
  hashable value. `next_node(cell)` returns the node entered from this
  one.
- `find_smooth_path(planner, start, goal, max_iterations=2000,
  visitor=None)`: A* from `start` until a node whose cell satisfies
  `goal.within_plan_radius(cell)` is taken from the queue. The planner
  supplies `neighbors(node)`, `is_legal(node)`, `edge_cost(u, v)` and
  `heuristic(node, goal)`. Returns a `SearchInfo` with `found_path`,
  `num_iter`, `search_time` (microseconds of CPU time) and `path`, which
  runs from `start.parent` through `start.cell` to the goal cell.
- `SearchVisitor` records the cells reached (`seen`, `seen_count`) and
  counts popped nodes; `NullVisitor` only counts events.
- `simplify_path(planner, path, simplify_margin=1.01, max_iter=100,
  decelerate_at_end=True)`: drops vertices whose removal raises
  `edge_cost` by no more than the margin; with `decelerate_at_end` the
  last cell is repeated.
- `smooth_path(poses)`: replaces each corner with a quadratic Bezier
  curve.
- `format_search_info(info, node_type="Node", overestimate_factor=1.0)`:
  a fixed-width summary line.
- `PathInfo`: a dataclass for path cost summaries.

### `skyroute.local_planning`

Works on numpy matrices whose rows are elevation bins and columns
azimuth bins.

- `conic_kernel(radius)`: cone-shaped kernel of length `2 * radius + 1`
  with peak 1.
- `pad_polar_matrix(matrix, n_lines_padding)`: pads with polar wrapping;
  raises `ValueError` if the column count is odd.
- `smooth_polar_matrix(matrix, smoothing_radius)`: returns a smoothed
  copy using the conic kernel.
- `generate_cost_image(cost_matrix, distance_matrix)`: RGB8 image bytes,
  red for distance cost and green for other cost, highest elevation row
  first.
- `color_image_index(e_ind, z_ind, color, grid_length_e, grid_length_z)`:
  byte offset of a colour channel in such an image.
- `TreeNode`: a look-ahead tree node with `origin`, `position`,
  `velocity`, `total_cost`, `heuristic`, `closed`, `depth` and
  `set_costs(heuristic, cost)`.
- `setpoint_from_path(path, path_generation_time, velocity,
  current_time)`: the point reached by travelling along the path (from
  its last element towards its first) at `velocity`; `None` if the path
  has fewer than two points or has been travelled past its end.

## What it does not do

skyroute is a library of parts, not a running planner. It has no
occupancy map, no risk or cost model of its own (the search takes these
from the planner object you pass in), no histogram construction from
point clouds, no messaging or vehicle interface, and no command-line
program.

## Installation

```
pip install .
```

numpy is the only runtime dependency.

## Example

```python
from skyroute.geometry import Point, distance
from skyroute.bezier import three_point_bezier
from skyroute.search import Node, find_smooth_path

curve = three_point_bezier(Point(0, 0, 0), Point(1, 1, 0), Point(2, 0, 0), 10)
print(len(curve), distance(curve[0], curve[-1]))  # 11 2.0


class Goal:
    def __init__(self, cell):
        self.cell = cell

    def within_plan_radius(self, cell):
        return cell == self.cell


class Grid:
    def neighbors(self, node):
        x, y = node.cell
        return [node.next_node((x + dx, y + dy)) for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1))]

    def is_legal(self, node):
        x, y = node.cell
        return 0 <= x < 5 and 0 <= y < 5

    def edge_cost(self, u, v):
        return 1.0

    def heuristic(self, node, goal):
        return abs(node.cell[0] - goal.cell[0]) + abs(node.cell[1] - goal.cell[1])


info = find_smooth_path(Grid(), Node((0, 0), (0, 0)), Goal((3, 2)))
print(info.found_path, info.path)
```

## Running the tests

```
pip install .[test]
pytest
```