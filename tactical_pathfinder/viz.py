# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch
from matplotlib.lines import Line2D
from tactical_pathfinder.models import Terrain
# endregion

# region Visualization Function
def show_route_heatmap(
    field,
    route,
    start,
    goal,
    expanded_order=None,
    title="Tactical route",
    show=True,
):
    """
    Render the danger field with cover/obstacles, optional search
    expansion overlay, and the route. Returns the matplotlib Figure.
    """
    H, W = field.shape
    terrain = field.layers.terrain

    fig, ax = plt.subplots(figsize=(8, 8 * H / max(W, 1) + 1))
    # region Base Image
    danger = ax.imshow(field.layers.danger, origin="lower", cmap="Reds", vmin=0.0, vmax=1.0)
    cbar = fig.colorbar(danger, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("Danger")

    masks = np.ma.masked_where(terrain == Terrain.OPEN, terrain)
    ax.imshow(
        masks,
        origin="lower",
        cmap=ListedColormap(["white", "tab:green", "black", "tab:orange"]),
        vmin=int(Terrain.OPEN), vmax=int(Terrain.HAZARD),
        alpha=0.8,
    )
    # endregion

    # region Expansion Heat Overlay
    if expanded_order:
        order_map = np.zeros((H, W), dtype=np.float32)
        for i, (x, y) in enumerate(expanded_order):
            order_map[y, x] = i + 1
        order_map /= max(1.0, order_map.max())
        ax.imshow(np.ma.masked_equal(order_map, 0), origin="lower", cmap="viridis", alpha=0.35)
    # endregion

    # region Path Overlay
    xs = [start[0]] + [p[0] for p in route or []]
    ys = [start[1]] + [p[1] for p in route or []]
    if route:
        ax.plot(xs, ys, color="cyan", linewidth=2.5, label="Route")
    ax.scatter(start[0], start[1], s=100, edgecolors="black", facecolors="white", label="Start", zorder=3)
    ax.scatter(goal[0], goal[1], s=100, edgecolors="black", facecolors="yellow", label="Goal", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="cyan", lw=2, label="Route"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=9),
        Patch(facecolor="black", label="Obstacle"),
        Patch(facecolor="tab:green", label="Cover"),
        Patch(facecolor="tab:orange", label="Hazard source"),
    ]
    ax.legend(handles=legend_elements, loc="upper left", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_xticks(range(W))
    ax.set_yticks(range(H))
    plt.tight_layout()
    if show:
        plt.show()
    return fig
    # endregion
# endregion
