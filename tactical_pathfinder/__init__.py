from tactical_pathfinder.grid import GridField
from tactical_pathfinder.models import Cell, Position, RoutePlan, Terrain
from tactical_pathfinder.planner import find_route, plan_route
