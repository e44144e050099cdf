# region Imports
from typing import Iterable, Optional, Tuple
from tactical_pathfinder.grid import GridField
from tactical_pathfinder.models import Terrain
# endregion

TERRAIN_SYMBOLS = {
    Terrain.OBSTACLE: "X",
    Terrain.COVER: "#",
    Terrain.HAZARD: "B",
}
BAND_SYMBOLS = {"high": "!", "medium": "o", "low": "."}


def cell_symbol(field: GridField, x: int, y: int) -> str:
    terrain = field.terrain(x, y)
    if terrain in TERRAIN_SYMBOLS:
        return TERRAIN_SYMBOLS[terrain]
    return BAND_SYMBOLS[field.danger_band(x, y)]


def render_ascii(
    field: GridField,
    route: Optional[Iterable[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
) -> str:
    """
    Text view of the field, north (y = H-1) at the top.

    S start, G goal, * route, X obstacle, # cover, B hazard source,
    then danger bands: ! high, o medium, . low.
    """
    on_route = {tuple(p) for p in route} if route else set()
    start = tuple(start) if start is not None else None
    goal = tuple(goal) if goal is not None else None

    lines = []
    for y in range(field.H - 1, -1, -1):
        row = []
        for x in range(field.W):
            p = (x, y)
            if p == start:
                row.append("S")
            elif p == goal:
                row.append("G")
            elif p in on_route:
                row.append("*")
            else:
                row.append(cell_symbol(field, x, y))
        lines.append(" ".join(row) + " ")
    return "\n".join(lines) + "\n"
