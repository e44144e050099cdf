# region Imports
from typing import Callable, Optional, Tuple
from tactical_pathfinder.config import BASE_STEP_COST, COVER_DISCOUNT, DANGER_WEIGHT
from tactical_pathfinder.grid import GridField
from tactical_pathfinder.models import Cell, Terrain
# endregion

# region Step Cost
def step_cost(cell: Cell) -> float:
    """
    Cost of moving INTO `cell`:
        1 + danger * 5 - cover * 0.4
    Plain open ground costs 1, full danger 6, full cover 0.6.
    """
    if cell.terrain == Terrain.OBSTACLE:
        raise ValueError(f"Obstacle at {tuple(cell.position)} has no step cost.")
    return BASE_STEP_COST + cell.danger * DANGER_WEIGHT - cell.cover * COVER_DISCOUNT
# endregion

# region Edge Cost Factory
def edge_cost_factory(field: GridField) -> Callable[[Tuple[int, int], Tuple[int, int]], Optional[float]]:
    # region Edge‑cost Function
    def edge_cost(u: Tuple[int, int], v: Tuple[int, int]) -> Optional[float]:
        cell = field.cell(*v)
        if cell is None or cell.terrain == Terrain.OBSTACLE:
            return None
        return step_cost(cell)
    # endregion

    return edge_cost
# endregion
