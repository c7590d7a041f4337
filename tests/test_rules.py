import pytest

from defaults import DEFAULT_SHAPES, DEFAULT_SOLUTION, default_grid, default_solution
from grid import Grid
from history import reset_orientation
from models import Direction, Shape
from rules import is_connected, is_well_paired, is_won


@pytest.mark.parametrize("wrapping", [False, True])
def test_all_empty_grid_is_won(wrapping):
    g = Grid(3, 3, wrapping)
    assert is_well_paired(g)
    assert is_connected(g)
    assert is_won(g)


def test_default_puzzle_is_not_won():
    assert not is_won(default_grid())


def test_default_puzzle_reset_to_north_is_not_won():
    g = default_grid()
    reset_orientation(g)
    assert not is_won(g)


def test_default_solution_is_won():
    g = default_solution()
    assert is_well_paired(g)
    assert is_connected(g)
    assert is_won(g)
    assert g.equal(Grid(5, 5, False, DEFAULT_SHAPES, DEFAULT_SOLUTION))


def test_two_closed_pairs_are_paired_but_disconnected():
    g = Grid(1, 4, False, [Shape.ENDPOINT] * 4,
             [Direction.EAST, Direction.WEST, Direction.EAST, Direction.WEST])
    assert is_well_paired(g)
    assert not is_connected(g)
    assert not is_won(g)


def test_unmatched_half_edge_does_not_connect():
    # The second endpoint faces the first, which looks off the border.
    g = Grid(1, 2, False, [Shape.ENDPOINT, Shape.ENDPOINT], [Direction.NORTH, Direction.WEST])
    assert not is_connected(g)
    assert not is_well_paired(g)


def test_single_piece_is_connected_but_can_be_mispaired():
    g = Grid(2, 2, False, [Shape.EMPTY, Shape.ENDPOINT, Shape.EMPTY, Shape.EMPTY])
    assert is_connected(g)
    assert not is_well_paired(g)


def test_wrapping_closes_a_ring_of_segments():
    shapes = [Shape.SEGMENT, Shape.SEGMENT]
    orientations = [Direction.EAST, Direction.EAST]
    assert is_won(Grid(1, 2, True, shapes, orientations))
    assert not is_won(Grid(1, 2, False, shapes, orientations))
