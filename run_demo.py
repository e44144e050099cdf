# region Header
"""
run_demo.py — Tactical path-finding demo

Builds the demo map (or a JSON scenario), prints it before and after the
search, and reports path length and danger along the route.

Requires:
  pip install -e .
Optional:
  --plot needs matplotlib (installed with the package)
"""
# endregion

# region Imports
import argparse
import json

from tactical_pathfinder.planner import plan_route
from tactical_pathfinder.render import render_ascii
from tactical_pathfinder.scenario import (
    DEMO_GOAL,
    DEMO_START,
    build_demo_field,
    field_from_mapping,
    parse_position,
)
# endregion


def load_scenario(path):
    with open(path) as f:
        data = json.load(f)
    field = field_from_mapping(data)
    start = parse_position(data.get("start", DEMO_START), "start")
    goal = parse_position(data.get("goal", DEMO_GOAL), "goal")
    return field, start, goal


def main(argv=None):
    ap = argparse.ArgumentParser(description="Tactical A* over a danger/cover grid")
    ap.add_argument("--scenario", help="JSON scenario file (default: built-in demo map)")
    ap.add_argument("--heuristic-scale", type=float, default=1.0,
                    help="Manhattan multiplier; 0.6 keeps the heuristic admissible")
    ap.add_argument("--plot", action="store_true", help="show a matplotlib heat map")
    args = ap.parse_args(argv)

    if args.scenario:
        field, start, goal = load_scenario(args.scenario)
    else:
        field, start, goal = build_demo_field(), DEMO_START, DEMO_GOAL

    print("=== MAP BEFORE SEARCH ===")
    print(render_ascii(field, start=start, goal=goal))

    plan = plan_route(field, start, goal, heuristic_scale=args.heuristic_scale)
    if not plan.found:
        print("No path found.")
        return 0

    print("=== MAP WITH PATH ===")
    print(render_ascii(field, plan.route, start, goal))
    print(f"Path length : {len(plan.route)}")
    print(f"Danger sum  : {plan.danger:.2f}")
    print(f"Total cost  : {plan.cost:.2f}  ({plan.expansions} expansions)")

    if args.plot:
        from tactical_pathfinder.viz import show_route_heatmap
        show_route_heatmap(field, plan.route, start, goal, plan.expanded_order)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
