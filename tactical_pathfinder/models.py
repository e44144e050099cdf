# models.py
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, NamedTuple
import numpy as np


class Terrain(IntEnum):
    OPEN = 0
    COVER = 1
    OBSTACLE = 2
    HAZARD = 3


class Position(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Cell:
    position: Position
    terrain: Terrain = Terrain.OPEN
    danger: float = 0.0     # 0-1 : higher means riskier
    cover: float = 0.0      # 0-1 : higher means safer


@dataclass
class FieldLayers:
    terrain: np.ndarray   # (H,W) int8 Terrain codes
    danger: np.ndarray    # (H,W) float64 in [0,1]
    cover: np.ndarray     # (H,W) float64 in [0,1]


@dataclass
class RoutePlan:
    route: List[Position]
    cost: float
    danger: float
    expansions: int
    expanded_order: List[Position] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return math.isfinite(self.cost)
