# metrics.py
from typing import Iterable, Tuple
from tactical_pathfinder.costs import step_cost
from tactical_pathfinder.grid import GridField


def route_danger(field: GridField, route: Iterable[Tuple[int, int]]) -> float:
    return float(sum(field.danger(x, y) for x, y in route))


def route_cost(field: GridField, route: Iterable[Tuple[int, int]]) -> float:
    """Sum of step costs along `route` (the start cell is never charged)."""
    total = 0.0
    for x, y in route:
        cell = field.cell(x, y)
        if cell is None:
            raise ValueError(f"Route position ({x}, {y}) is outside the grid.")
        total += step_cost(cell)
    return float(total)
