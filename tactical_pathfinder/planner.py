# region Imports
from typing import List, Optional, Tuple
from tactical_pathfinder.astar_core import astar, neighbors_4, scaled_manhattan
from tactical_pathfinder.costs import edge_cost_factory
from tactical_pathfinder.grid import GridField
from tactical_pathfinder.metrics import route_danger
from tactical_pathfinder.models import Position, RoutePlan
# endregion

# region Route Planning
def plan_route(
    field: GridField,
    start: Tuple[int, int],
    goal: Tuple[int, int],
    *,
    heuristic_scale: float = 1.0,
    max_expansions: Optional[int] = None,
) -> RoutePlan:
    """
    Least-cost 4-connected route from `start` to `goal` over `field`.

    An unreachable goal (walled off, an obstacle itself, or outside the
    grid) is reported as an empty route with infinite cost, not raised.
    `heuristic_scale` multiplies the Manhattan estimate; MIN_STEP_COST
    keeps it admissible under full cover at the price of more expansions.
    """
    start, goal = Position(*start), Position(*goal)
    if not (field.in_bounds(*start) and field.in_bounds(*goal)):
        return RoutePlan(route=[], cost=float("inf"), danger=0.0, expansions=0)

    def neigh(u): return neighbors_4(u, field.W, field.H)

    path, cost, expansions, expanded_order = astar(
        start=start, goal=goal, neighbors_fn=neigh,
        edge_cost_fn=edge_cost_factory(field),
        heuristic_fn=scaled_manhattan(heuristic_scale),
        max_expansions=max_expansions,
    )
    return RoutePlan(
        route=path,
        cost=float(cost),
        danger=route_danger(field, path),
        expansions=expansions,
        expanded_order=expanded_order,
    )


def find_route(field: GridField, start: Tuple[int, int], goal: Tuple[int, int]) -> List[Position]:
    return plan_route(field, start, goal).route
# endregion
