# config.py

# Step cost = BASE_STEP_COST + danger * DANGER_WEIGHT - cover * COVER_DISCOUNT
BASE_STEP_COST = 1.0
DANGER_WEIGHT = 5.0
COVER_DISCOUNT = 0.4
MIN_STEP_COST = BASE_STEP_COST - COVER_DISCOUNT  # danger 0, cover 1

# Editing defaults
DEFAULT_COVER = 0.8
DEFAULT_HAZARD_RADIUS = 3

# Danger banding for display (strictly greater than)
HIGH_DANGER = 0.7
MEDIUM_DANGER = 0.3

# Relaxation only counts an improvement beyond this tolerance
COST_TOL = 1e-12

# HTTP service
HOST = "0.0.0.0"
PORT = 8081
MAX_GRID_SIDE = 512
