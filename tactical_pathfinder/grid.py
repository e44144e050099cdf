# region Imports
import math
from typing import Optional
import numpy as np
from tactical_pathfinder.config import (
    DEFAULT_COVER,
    DEFAULT_HAZARD_RADIUS,
    HIGH_DANGER,
    MEDIUM_DANGER,
)
from tactical_pathfinder.hazards import radiate_danger
from tactical_pathfinder.models import Cell, FieldLayers, Position, Terrain
# endregion


class GridField:
    """
    Fixed-size W x H tactical map: terrain class, danger and cover per cell.

    Layers are numpy arrays indexed [y, x]. Edits on out-of-range
    coordinates are silently ignored so scenario setup never crashes on a
    bad coordinate; everything else about bad input raises ValueError.
    """

    def __init__(self, width: int, height: int):
        width, height = int(width), int(height)
        if width < 1 or height < 1:
            raise ValueError(
                f"Grid dimensions must be positive (W={width}, H={height})."
            )
        self.W = width
        self.H = height
        self.layers = FieldLayers(
            terrain=np.full((height, width), Terrain.OPEN, dtype=np.int8),
            danger=np.zeros((height, width), dtype=np.float64),
            cover=np.zeros((height, width), dtype=np.float64),
        )

    @property
    def shape(self):
        return self.H, self.W

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.W and 0 <= y < self.H

    # region Read Access
    def _require(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise ValueError(f"({x}, {y}) is outside the {self.W}x{self.H} grid.")

    def terrain(self, x: int, y: int) -> Terrain:
        self._require(x, y)
        return Terrain(int(self.layers.terrain[y, x]))

    def danger(self, x: int, y: int) -> float:
        self._require(x, y)
        return float(self.layers.danger[y, x])

    def cover(self, x: int, y: int) -> float:
        self._require(x, y)
        return float(self.layers.cover[y, x])

    def is_obstacle(self, x: int, y: int) -> bool:
        self._require(x, y)
        return bool(self.layers.terrain[y, x] == Terrain.OBSTACLE)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Immutable snapshot of one cell, or None when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return Cell(
            position=Position(x, y),
            terrain=Terrain(int(self.layers.terrain[y, x])),
            danger=float(self.layers.danger[y, x]),
            cover=float(self.layers.cover[y, x]),
        )

    def danger_band(self, x: int, y: int) -> str:
        d = self.danger(x, y)
        if d > HIGH_DANGER:
            return "high"
        if d > MEDIUM_DANGER:
            return "medium"
        return "low"
    # endregion

    # region Editing Helpers
    def set_cover(self, x: int, y: int, value: float = DEFAULT_COVER) -> None:
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Cover intensity must be in [0, 1] (got {value}).")
        if not self.in_bounds(x, y):
            return
        self.layers.terrain[y, x] = Terrain.COVER
        self.layers.cover[y, x] = value

    def set_obstacle(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            self.layers.terrain[y, x] = Terrain.OBSTACLE

    def add_hazard(self, x: int, y: int, radius: float = DEFAULT_HAZARD_RADIUS) -> None:
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"Hazard radius must be a positive finite number (got {radius}).")
        if not self.in_bounds(x, y):
            return
        self.layers.terrain[y, x] = Terrain.HAZARD
        self.layers.danger = radiate_danger(self.layers.danger, (x, y), radius)
    # endregion
