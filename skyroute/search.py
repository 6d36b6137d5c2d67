"""Graph-search nodes, A* over smooth paths, and path post-processing."""

from __future__ import annotations

import heapq
import itertools
import math
import time
from dataclasses import dataclass, field, replace
from typing import Any, Hashable, Iterable, Protocol, Sequence

from skyroute.bezier import three_point_bezier
from skyroute.geometry import middle_point
from skyroute.paths import Pose


@dataclass(frozen=True)
class Node:
    """A search state: a cell together with the cell it was entered from."""

    cell: Hashable
    parent: Hashable

    def next_node(self, next_cell: Hashable) -> Node:
        """Return the node reached by moving from this node's cell to next_cell."""
        return type(self)(next_cell, self.cell)


@dataclass
class PathInfo:
    """Summary of the costs along a path."""

    is_blocked: bool = False
    cost: float = 0.0
    dist: float = 0.0
    risk: float = 0.0
    smoothness: float = 0.0


@dataclass
class SearchInfo:
    """Outcome of a search; search_time is in microseconds."""

    found_path: bool = False
    num_iter: int = 0
    search_time: float = 0.0
    path: list = field(default_factory=list)


class SearchVisitor:
    """Records which cells a search has reached and how often."""

    def __init__(self) -> None:
        self.seen: set = set()
        self.seen_count: dict = {}
        self.num_popped: int = 0

    def init(self) -> None:
        """Forget everything recorded by an earlier search."""
        self.seen.clear()
        self.seen_count.clear()
        self.num_popped = 0

    def pop_node(self, u: Node) -> None:
        """Count a node taken from the queue."""
        self.num_popped += 1

    def per_neighbor(self, u: Node, v: Node) -> None:
        """Record that v was reached with a better cost through u."""
        self.seen_count[v.cell] = 1.0 + self.seen_count.get(v.cell, 0.0)
        self.seen.add(v.cell)


class NullVisitor:
    """A visitor that records no cells, only how many events it was given."""

    def __init__(self) -> None:
        self.events: int = 0

    def init(self) -> None:
        """Reset the event count."""
        self.events = 0

    def pop_node(self, u: Node) -> None:
        """Count the event and otherwise ignore it."""
        self.events += 1

    def per_neighbor(self, u: Node, v: Node) -> None:
        """Count the event and otherwise ignore it."""
        self.events += 1


class Planner(Protocol):
    """What the search needs from a planner."""

    def neighbors(self, node: Node) -> Iterable[Node]: ...

    def is_legal(self, node: Node) -> bool: ...

    def edge_cost(self, u: Node, v: Node) -> float: ...

    def heuristic(self, node: Node, goal: Any) -> float: ...


def format_search_info(info: SearchInfo, node_type: str = "Node", overestimate_factor: float = 1.0) -> str:
    """Return a fixed-width line describing a search's timing and iterations."""
    if info.num_iter:
        avg_time = info.search_time / info.num_iter
    elif info.search_time:
        avg_time = math.copysign(math.inf, info.search_time)
    else:
        avg_time = math.nan
    return (
        f"{node_type:<20}{avg_time:<10.3g}{overestimate_factor:<10.3g}"
        f"{info.num_iter:<10}{0.0:<10.3g}"
    )


def smooth_path(poses: Sequence[Pose]) -> list[Pose]:
    """Return the poses with every corner replaced by a quadratic Bezier curve."""
    if len(poses) < 3:
        return list(poses)
    first = poses[0]
    smoothed = [first]
    for a, b, c in zip(poses, poses[1:], poses[2:]):
        p1 = b.position
        p0 = middle_point(a.position, p1)
        p2 = middle_point(p1, c.position)
        smoothed.extend(replace(first, position=point) for point in three_point_bezier(p0, p1, p2))
    smoothed.append(poses[-1])
    return smoothed


def simplify_path(
    planner: Planner,
    path: Sequence[Hashable],
    simplify_margin: float = 1.01,
    max_iter: int = 100,
    decelerate_at_end: bool = True,
) -> list:
    """Drop vertices whose removal raises the cost by no more than simplify_margin."""
    if len(path) < 3:
        return list(path)

    curr_path = list(path)
    for _ in range(int(math.ceil(max_iter))):
        # The first two vertices cannot be removed.
        simple_path = curr_path[:2]
        i = 3
        while i < len(curr_path):
            parent = Node(curr_path[i - 2], curr_path[i - 3])
            u = Node(curr_path[i - 1], curr_path[i - 2])
            v = Node(curr_path[i], curr_path[i - 1])
            w = Node(curr_path[i], curr_path[i - 2])
            curr_cost = planner.edge_cost(parent, u) + planner.edge_cost(u, v)
            new_cost = planner.edge_cost(parent, w)
            if new_cost > simplify_margin * curr_cost:
                simple_path.append(curr_path[i - 1])
            simple_path.append(curr_path[i])
            i += 2
        if i == len(curr_path):
            simple_path.append(curr_path[i - 1])

        if len(simple_path) == len(curr_path):
            break
        curr_path = simple_path

    if decelerate_at_end:
        # Doubling the last point gives a triplet that stops at the end.
        curr_path.append(curr_path[-1])
    return curr_path


def find_smooth_path(
    planner: Planner,
    start: Node,
    goal: Any,
    max_iterations: int = 2000,
    visitor: SearchVisitor | NullVisitor | None = None,
) -> SearchInfo:
    """Run A* from start until a cell within the goal's plan radius is popped.

    The goal must offer ``within_plan_radius(cell)``. On success the returned
    info's path runs from start.parent through start.cell to the goal cell.
    """
    if visitor is None:
        visitor = NullVisitor()
    visitor.init()

    seen: set[Node] = set()
    parent: dict[Node, Node] = {}
    dist: dict[Node, float] = {start: 0.0}
    tie = itertools.count()
    queue: list[tuple[float, int, Node]] = [(0.0, next(tie), start)]
    best_goal: Node | None = None
    num_iter = 0

    start_time = time.process_time()
    while queue and num_iter < max_iterations:
        _, _, u = heapq.heappop(queue)
        if u in seen:
            continue
        seen.add(u)
        visitor.pop_node(u)

        if goal.within_plan_radius(u.cell):
            best_goal = u
            break
        num_iter += 1

        for v in planner.neighbors(u):
            if not planner.is_legal(v):
                continue
            new_dist = dist[u] + planner.edge_cost(u, v)
            if new_dist < dist.get(v, math.inf):
                parent[v] = u
                dist[v] = new_dist
                heapq.heappush(queue, (new_dist + planner.heuristic(v, goal), next(tie), v))
                visitor.per_neighbor(u, v)
    total_time = (time.process_time() - start_time) * 1e6

    if best_goal is None:
        return SearchInfo(False, num_iter, total_time)

    path = []
    walker = best_goal
    while walker != start:
        path.append(walker.cell)
        walker = parent[walker]
    path.append(start.cell)
    path.append(start.parent)
    path.reverse()
    return SearchInfo(True, num_iter, total_time, path)