# app.py — Flask API over the tactical route planner
# deps: pip install flask numpy pillow

from __future__ import annotations
import io
import numpy as np
from flask import Flask, request, jsonify, make_response
from PIL import Image

from tactical_pathfinder.config import HOST, PORT, MAX_GRID_SIDE, MIN_STEP_COST
from tactical_pathfinder.models import Terrain
from tactical_pathfinder.planner import plan_route
from tactical_pathfinder.scenario import field_from_mapping, parse_position

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp


def _read_request():
    """Parse body → (field, start, goal, heuristic_scale); ValueError on bad input."""
    data = request.get_json(force=True, silent=True) or {}
    field = field_from_mapping(data)
    start = parse_position(data.get("start"), "start")
    goal = parse_position(data.get("goal"), "goal")
    h_scale = data.get("heuristic_scale", None)
    h_scale = (1.0 if h_scale in (None, "", "null") else float(h_scale))
    if h_scale < 0:
        raise ValueError("heuristic_scale must be non-negative")
    return field, start, goal, h_scale


@app.route("/", methods=["GET"])
def root():
    return {
        "ok": True,
        "solve": "/route/solve (POST JSON)",
        "render": "/route/render.png (POST JSON)",
        "max_grid_side": MAX_GRID_SIDE,
        "admissible_heuristic_scale": MIN_STEP_COST,
    }

# ======= Route API =======
@app.route("/route/solve", methods=["POST"])
def route_solve():
    """
    JSON body:
    {
      "width": 15, "height": 10,
      "cover":     [{"x":..,"y":..,"value":0.8}, ...],
      "obstacles": [{"x":..,"y":..}, ...],
      "hazards":   [{"x":..,"y":..,"radius":3}, ...],
      "start": [1, 1],
      "goal":  [10, 8],
      "heuristic_scale": null      // default 1.0; 0.6 keeps h admissible
    }
    """
    try:
        field, start, goal, h_scale = _read_request()
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    plan = plan_route(field, start, goal, heuristic_scale=h_scale)
    app.logger.info("route %s -> %s: %d steps, %d expansions",
                    tuple(start), tuple(goal), len(plan.route), plan.expansions)

    if not plan.found:
        diag = {
            "grid": [field.W, field.H],
            "start_in_bounds": field.in_bounds(*start),
            "goal_in_bounds": field.in_bounds(*goal),
            "goal_is_obstacle": field.in_bounds(*goal) and bool(field.is_obstacle(*goal)),
            "obstacle_ratio": float((field.layers.terrain == Terrain.OBSTACLE).mean()),
            "expansions": plan.expansions,
        }
        return jsonify({"error": "No path found.", "positions": [], "diag": diag}), 200

    return jsonify({
        "positions": [{"x": int(x), "y": int(y)} for x, y in plan.route],
        "length": len(plan.route),
        "total_cost": plan.cost,
        "danger_sum": plan.danger,
        "expansions": plan.expansions,
    })


@app.route("/route/render.png", methods=["POST"])
def route_render():
    try:
        field, start, goal, h_scale = _read_request()
        scale = max(1, min(64, int(request.args.get("scale", "16"))))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    plan = plan_route(field, start, goal, heuristic_scale=h_scale)

    # grayscale danger (bright = safe), obstacles black, route/endpoints coloured
    shade = ((1.0 - field.layers.danger) * 255).astype("uint8")
    rgb = np.stack([shade, shade, shade], axis=-1)
    rgb[field.layers.terrain == Terrain.OBSTACLE] = (0, 0, 0)
    rgb[field.layers.terrain == Terrain.COVER] = (60, 160, 60)
    for x, y in plan.route:
        rgb[y, x] = (0, 200, 255)
    for (x, y), colour in ((start, (255, 255, 255)), (goal, (255, 220, 0))):
        if field.in_bounds(x, y):
            rgb[y, x] = colour

    img = Image.fromarray(np.ascontiguousarray(np.flipud(rgb)))
    img = img.resize((field.W * scale, field.H * scale), Image.Resampling.NEAREST)
    buf = io.BytesIO()
    img.save(buf, "PNG")
    buf.seek(0)
    resp = make_response(buf.read())
    resp.headers["Content-Type"] = "image/png"
    return resp


if __name__ == "__main__":
    app.run(host=HOST, port=PORT, threaded=True)
