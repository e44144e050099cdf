import numpy as np
import pytest

from tactical_pathfinder.grid import GridField
from tactical_pathfinder.hazards import radiate_danger
from tactical_pathfinder.models import Cell, Position, Terrain


def test_new_field_is_open_and_safe():
    field = GridField(4, 3)
    assert field.shape == (3, 4)
    for y in range(3):
        for x in range(4):
            cell = field.cell(x, y)
            assert cell == Cell(position=Position(x, y))
            assert cell.terrain is Terrain.OPEN


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (0, 0)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        GridField(width, height)


def test_in_bounds_edges():
    field = GridField(3, 2)
    assert field.in_bounds(0, 0)
    assert field.in_bounds(2, 1)
    assert not field.in_bounds(3, 1)
    assert not field.in_bounds(2, 2)
    assert not field.in_bounds(-1, 0)
    assert field.cell(3, 0) is None


def test_out_of_bounds_edits_are_ignored():
    field = GridField(3, 3)
    field.set_cover(5, 5, 0.5)
    field.set_obstacle(-1, 0)
    field.add_hazard(3, 0, 2)
    assert not field.layers.terrain.any()
    assert not field.layers.danger.any()
    assert not field.layers.cover.any()


def test_set_cover_and_obstacle():
    field = GridField(3, 3)
    field.set_cover(1, 1, 0.5)
    field.set_cover(2, 2)
    field.set_obstacle(0, 2)
    assert field.terrain(1, 1) is Terrain.COVER
    assert field.cover(1, 1) == pytest.approx(0.5)
    assert field.cover(2, 2) == pytest.approx(0.8)
    assert field.is_obstacle(0, 2)
    assert not field.is_obstacle(1, 1)


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_cover_outside_unit_interval_rejected(value):
    field = GridField(3, 3)
    with pytest.raises(ValueError):
        field.set_cover(1, 1, value)


@pytest.mark.parametrize("radius", [0, -2, float("nan"), float("inf")])
def test_non_positive_radius_rejected(radius):
    field = GridField(3, 3)
    with pytest.raises(ValueError):
        field.add_hazard(1, 1, radius)


def test_hazard_fade_law():
    field = GridField(7, 7)
    field.add_hazard(3, 3, 2)
    assert field.terrain(3, 3) is Terrain.HAZARD
    assert field.danger(3, 3) == pytest.approx(1.0)
    assert field.danger(4, 3) == pytest.approx(0.5)
    assert field.danger(4, 4) == pytest.approx(1.0 - np.sqrt(2.0) / 2.0)
    # exactly on the radius and beyond
    assert field.danger(5, 3) == 0.0
    assert field.danger(6, 6) == 0.0
    assert field.danger(0, 0) == 0.0


def test_danger_stays_in_unit_interval():
    field = GridField(12, 9)
    for x, y, r in ((0, 0, 4), (11, 8, 20), (5, 4, 1), (6, 4, 2.5)):
        field.add_hazard(x, y, r)
    assert field.layers.danger.min() >= 0.0
    assert field.layers.danger.max() <= 1.0


def test_overlapping_hazards_take_maximum():
    field = GridField(7, 7)
    field.add_hazard(3, 3, 2)
    before = field.layers.danger.copy()
    field.add_hazard(5, 3, 3)

    assert np.all(field.layers.danger >= before)
    # closer to the second source: its fade wins, no sum
    assert field.danger(4, 3) == pytest.approx(1.0 - 1.0 / 3.0)
    assert field.danger(3, 3) == pytest.approx(1.0)
    assert field.terrain(3, 3) is Terrain.HAZARD
    assert field.terrain(5, 3) is Terrain.HAZARD


def test_weaker_hazard_never_lowers_danger():
    field = GridField(5, 5)
    field.add_hazard(2, 2, 4)
    before = field.layers.danger.copy()
    field.add_hazard(2, 2, 1)
    assert np.array_equal(field.layers.danger, before)


def test_radiate_danger_is_pure():
    danger = np.zeros((5, 5))
    out = radiate_danger(danger, (0, 0), 3)
    assert not danger.any()
    assert out[0, 0] == pytest.approx(1.0)
    assert out[0, 3] == 0.0
    assert out[1, 1] == pytest.approx(1.0 - np.sqrt(2.0) / 3.0)


def test_radiate_danger_keeps_higher_existing_values():
    danger = np.full((3, 3), 0.9)
    out = radiate_danger(danger, (1, 1), 1)
    assert np.all(out >= 0.9)
    assert out[1, 1] == pytest.approx(1.0)


def test_danger_band_thresholds():
    field = GridField(10, 1)
    field.add_hazard(0, 0, 10)
    assert field.danger_band(1, 0) == "high"     # 0.9
    assert field.danger_band(5, 0) == "medium"   # 0.5
    assert field.danger_band(8, 0) == "low"      # 0.2


@pytest.mark.parametrize("x,y", [(-1, 0), (4, 0), (0, -1), (0, 1)])
def test_reads_outside_grid_are_rejected(x, y):
    field = GridField(4, 1)
    field.add_hazard(3, 0, 1)
    for read in (field.terrain, field.danger, field.cover, field.is_obstacle, field.danger_band):
        with pytest.raises(ValueError):
            read(x, y)
    assert field.cell(x, y) is None


def test_radiate_danger_rejects_nan_radius():
    with pytest.raises(ValueError):
        radiate_danger(np.zeros((3, 3)), (1, 1), float("nan"))
