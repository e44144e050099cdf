# region Imports
import math
from typing import Tuple
import numpy as np
# endregion

# region Fade Law
def fade_intensity(dist: np.ndarray, radius: float) -> np.ndarray:
    """
    Linear fade from 1 at the source to 0 at the radius edge:
        intensity = 1 - dist / radius   (dist <= radius), else 0
    """
    inside = dist <= radius
    intensity = np.where(inside, 1.0 - dist / radius, 0.0)
    return np.clip(intensity, 0.0, 1.0)
# endregion

# region Hazard Radiation
def radiate_danger(
    danger: np.ndarray,
    source: Tuple[int, int],
    radius: float,
) -> np.ndarray:
    """
    Return a new danger layer with one hazard source radiated into it.

    Each cell keeps the maximum of its current danger and the faded
    intensity from `source`, so overlapping hazards take the worst
    contribution rather than a sum. Cells beyond `radius` are unchanged.
    """
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"Hazard radius must be a positive finite number (got {radius}).")
    x, y = source
    H, W = danger.shape
    yy, xx = np.ogrid[:H, :W]
    dist = np.hypot(xx - x, yy - y)
    return np.maximum(danger, fade_intensity(dist, float(radius)))
# endregion
