import pytest

from tactical_pathfinder.costs import edge_cost_factory, step_cost
from tactical_pathfinder.grid import GridField
from tactical_pathfinder.metrics import route_cost, route_danger
from tactical_pathfinder.models import Cell, Position, Terrain


def test_open_cell_costs_one():
    assert step_cost(Cell(position=Position(0, 0))) == pytest.approx(1.0)


def test_danger_and_cover_terms():
    p = Position(0, 0)
    assert step_cost(Cell(p, Terrain.OPEN, danger=1.0)) == pytest.approx(6.0)
    assert step_cost(Cell(p, Terrain.COVER, cover=1.0)) == pytest.approx(0.6)
    assert step_cost(Cell(p, Terrain.COVER, danger=0.5, cover=0.5)) == pytest.approx(3.3)


def test_obstacle_has_no_step_cost():
    with pytest.raises(ValueError):
        step_cost(Cell(Position(1, 1), Terrain.OBSTACLE))


def test_edge_cost_charges_destination_cell():
    field = GridField(3, 1)
    field.set_cover(0, 0, 1.0)
    field.add_hazard(2, 0, 2)
    field.set_obstacle(1, 0)
    edge_cost = edge_cost_factory(field)

    assert edge_cost((1, 0), (0, 0)) == pytest.approx(0.6)
    assert edge_cost((1, 0), (2, 0)) == pytest.approx(6.0)
    assert edge_cost((0, 0), (1, 0)) is None
    assert edge_cost((0, 0), (-1, 0)) is None


def test_route_statistics():
    field = GridField(4, 1)
    field.add_hazard(3, 0, 2)
    route = [(1, 0), (2, 0), (3, 0)]
    assert route_danger(field, route) == pytest.approx(0.5 + 1.0)
    assert route_cost(field, route) == pytest.approx(1.0 + 3.5 + 6.0)
    assert route_danger(field, []) == 0.0


def test_route_statistics_reject_positions_off_the_grid():
    field = GridField(4, 1)
    field.add_hazard(3, 0, 1)
    with pytest.raises(ValueError):
        route_danger(field, [(-1, 0)])
    with pytest.raises(ValueError):
        route_cost(field, [(1, 0), (4, 0)])
