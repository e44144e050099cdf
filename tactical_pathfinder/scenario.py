# region Imports
from typing import Any, Dict, Mapping
from tactical_pathfinder.config import DEFAULT_COVER, DEFAULT_HAZARD_RADIUS, MAX_GRID_SIDE
from tactical_pathfinder.grid import GridField
from tactical_pathfinder.models import Position
# endregion

# region Payload Parsing
def parse_int(raw: Any, name: str) -> int:
    """Integer from a JSON value; 3 and 3.0 pass, 1.7 does not."""
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from e
    if not value.is_integer():
        raise ValueError(f"{name} must be an integer (got {raw!r})")
    return int(value)


def parse_position(raw: Any, name: str = "position") -> Position:
    """Accept {"x":..,"y":..} or [x, y]."""
    try:
        if isinstance(raw, Mapping):
            x, y = raw["x"], raw["y"]
        else:
            x, y = raw
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"{name} must be {{'x':..,'y':..}} or [x, y] (got {raw!r})") from e
    return Position(parse_int(x, f"{name}.x"), parse_int(y, f"{name}.y"))


def field_from_mapping(data: Mapping[str, Any]) -> GridField:
    """
    Build a GridField from a JSON-like payload:

    {
      "width": 15, "height": 10,
      "cover":     [{"x":3,"y":3,"value":0.8}, ...],   // value optional
      "obstacles": [{"x":2,"y":2}, ...],
      "hazards":   [{"x":8,"y":5,"radius":3}, ...]     // radius optional
    }

    Edits are applied in that order; out-of-range coordinates are ignored.
    """
    if "width" not in data or "height" not in data:
        raise ValueError("width and height are required integers")
    W = parse_int(data["width"], "width")
    H = parse_int(data["height"], "height")
    if W > MAX_GRID_SIDE or H > MAX_GRID_SIDE:
        raise ValueError(f"Grid side limited to {MAX_GRID_SIDE} cells (got {W}x{H}).")

    field = GridField(W, H)
    for item in data.get("cover") or []:
        x, y = parse_position(item, "cover")
        value = item.get("value", DEFAULT_COVER) if isinstance(item, Mapping) else DEFAULT_COVER
        field.set_cover(x, y, float(value))
    for item in data.get("obstacles") or []:
        field.set_obstacle(*parse_position(item, "obstacle"))
    for item in data.get("hazards") or []:
        x, y = parse_position(item, "hazard")
        radius = item.get("radius", DEFAULT_HAZARD_RADIUS) if isinstance(item, Mapping) else DEFAULT_HAZARD_RADIUS
        field.add_hazard(x, y, float(radius))
    return field
# endregion

# region Demo Map
DEMO_START = Position(1, 1)
DEMO_GOAL = Position(10, 8)
DEMO_COVER = ((3, 3), (3, 4), (7, 6), (7, 7), (11, 2), (11, 3))
DEMO_HAZARDS = ((8, 5, 3), (12, 7, 3), (12, 5, 6))


def demo_payload() -> Dict[str, Any]:
    """15x10 map: a wall at x=2 beside the start, three cover pairs and three bombs."""
    return {
        "width": 15,
        "height": 10,
        "cover": [{"x": x, "y": y} for x, y in DEMO_COVER],
        "obstacles": [{"x": 2, "y": y} for y in range(2, 8)],
        "hazards": [{"x": x, "y": y, "radius": r} for x, y, r in DEMO_HAZARDS],
        "start": list(DEMO_START),
        "goal": list(DEMO_GOAL),
    }


def build_demo_field() -> GridField:
    return field_from_mapping(demo_payload())
# endregion
