import random

import pytest

from generator import add_edge, add_half_edge, random_grid
from grid import Grid
from models import Direction, Shape
from rules import is_won


def test_add_half_edge_grows_the_piece():
    g = Grid(1, 1)
    add_half_edge(g, 0, 0, Direction.EAST)
    assert (g.get_shape(0, 0), g.get_orientation(0, 0)) == (Shape.ENDPOINT, Direction.EAST)
    add_half_edge(g, 0, 0, Direction.SOUTH)
    assert (g.get_shape(0, 0), g.get_orientation(0, 0)) == (Shape.CORNER, Direction.EAST)
    add_half_edge(g, 0, 0, Direction.WEST)
    assert (g.get_shape(0, 0), g.get_orientation(0, 0)) == (Shape.TEE, Direction.SOUTH)
    add_half_edge(g, 0, 0, Direction.NORTH)
    assert g.get_shape(0, 0) == Shape.CROSS
    with pytest.raises(ValueError):
        add_half_edge(g, 0, 0, Direction.NORTH)


def test_add_edge_links_both_sides_once():
    g = Grid(2, 2)
    assert add_edge(g, 0, 0, Direction.SOUTH)
    assert is_won(g)
    assert not add_edge(g, 1, 0, Direction.NORTH)
    assert not add_edge(g, 0, 0, Direction.NORTH)


def test_add_edge_refuses_self_loop_on_thin_wrapping_grid():
    g = Grid(1, 3, True)
    assert not add_edge(g, 0, 0, Direction.NORTH)
    assert g.non_empty_count() == 0


@pytest.mark.parametrize("rows,cols,wrapping,nb_empty,nb_extra", [
    (2, 1, False, 0, 0),
    (1, 2, True, 0, 1),
    (3, 3, False, 1, 1),
    (4, 5, True, 3, 4),
    (6, 6, False, 0, 5),
])
def test_random_grid_is_won_with_requested_empties(rows, cols, wrapping, nb_empty, nb_extra):
    for seed in range(5):
        g = random_grid(rows, cols, wrapping, nb_empty, nb_extra, rng=random.Random(seed))
        assert (g.rows, g.cols, g.wrapping) == (rows, cols, wrapping)
        assert g.non_empty_count() == rows * cols - nb_empty
        assert is_won(g)


def test_random_grid_is_reproducible_with_seeded_rng():
    a = random_grid(4, 4, nb_empty=1, nb_extra=2, rng=random.Random(9))
    b = random_grid(4, 4, nb_empty=1, nb_extra=2, rng=random.Random(9))
    assert a.equal(b)


def test_random_grid_honours_configured_seed(monkeypatch):
    import generator

    monkeypatch.setattr(generator.CFG, "RANDOM_SEED", 5, raising=False)
    assert random_grid(3, 4).equal(random_grid(3, 4))


@pytest.mark.parametrize("rows,cols,nb_empty,nb_extra", [
    (1, 1, 0, 0),
    (2, 2, 3, 0),
    (2, 2, -1, 0),
    (2, 2, 0, -1),
])
def test_random_grid_rejects_bad_arguments(rows, cols, nb_empty, nb_extra):
    with pytest.raises(ValueError):
        random_grid(rows, cols, nb_empty=nb_empty, nb_extra=nb_extra, rng=random.Random(0))


def test_random_grid_reports_saturation():
    with pytest.raises(ValueError):
        random_grid(1, 2, nb_extra=1, rng=random.Random(0))
