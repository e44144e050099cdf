# region Imports and Typing
from typing import Any, Callable, Dict, List, Optional, Tuple
import heapq
from tactical_pathfinder.config import COST_TOL
from tactical_pathfinder.models import Position
# endregion

# region Neighbor Generation
STEPS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def neighbors_4(u, W, H):
    x, y = u
    for dx, dy in STEPS_4:
        xx, yy = x + dx, y + dy
        if 0 <= xx < W and 0 <= yy < H:
            yield Position(xx, yy)
# endregion

# region Heuristics
def manhattan(a, b) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def scaled_manhattan(scale=1.0):
    def h(a, b):
        return scale * manhattan(a, b)
    return h
# endregion

# region Path Reconstruction
def reconstruct(parent, goal):
    """Walk predecessors back from `goal`; the start (no predecessor) is left out."""
    path = []
    v = goal
    while v in parent:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path
# endregion

# region A* Algorithm
def astar(
    start: Tuple[int, int],
    goal: Tuple[int, int],
    neighbors_fn: Callable[[Tuple[int, int]], Any],
    edge_cost_fn: Callable[[Tuple[int, int], Tuple[int, int]], Optional[float]],
    heuristic_fn: Callable[[Tuple[int, int], Tuple[int, int]], float],
    *,
    max_expansions: Optional[int] = None,
):
    """
    Returns:
      path, total_cost, expansions, expanded_order

    `path` runs from the step after `start` up to and including `goal`;
    it is empty (with cost inf) when the goal cannot be reached, and empty
    (with cost 0) when start == goal.

    Open-list entries are immutable (f, h, counter, node, g) snapshots.
    A node is pushed again whenever its cost improves, and entries whose g
    is worse than the best known cost are skipped on pop. The heuristic may
    overestimate in covered regions, so an expanded node can still be
    reopened by a cheaper path.
    """
    start, goal = Position(*start), Position(*goal)
    if start == goal:
        return [], 0.0, 0, []

    counter = 0  # stable tie-breaker for equal f and h
    openh: List[Tuple[float, float, int, Position, float]] = []
    h0 = heuristic_fn(start, goal)
    heapq.heappush(openh, (h0, h0, counter, start, 0.0))
    g: Dict[Position, float] = {start: 0.0}
    parent: Dict[Position, Position] = {}
    expansions = 0
    expanded_order: List[Position] = []

    while openh:
        f, h, _, u, gu = heapq.heappop(openh)

        # Superseded by a cheaper entry pushed later
        if gu > g[u] + COST_TOL:
            continue

        if u == goal:
            return reconstruct(parent, u), gu, expansions, expanded_order

        # region Expansion Limits
        if max_expansions is not None and expansions >= max_expansions:
            return [], float("inf"), expansions, expanded_order
        # endregion

        expanded_order.append(u)
        expansions += 1

        # region Neighbor Loop
        for v in neighbors_fn(u):
            c = edge_cost_fn(u, v)
            if c is None:
                continue
            alt = gu + c
            old = g.get(v)
            if old is None or alt < old - COST_TOL:
                g[v] = alt
                parent[v] = u
                hv = heuristic_fn(v, goal)
                counter += 1
                heapq.heappush(openh, (alt + hv, hv, counter, v, alt))
        # endregion

    return [], float("inf"), expansions, expanded_order
# endregion
