# solver/masks.py
"""Per-cell allowed-orientation masks and the local pruning check."""

from __future__ import annotations

from typing import List

from edges import adjacent, check_edge
from grid import Grid
from models import Direction, EdgeStatus, Shape

ORIENTATION_BITS = tuple(1 << d for d in Direction)
ALL_ORIENTATIONS = 0b1111

# Shapes whose four orientations are indistinguishable.
FIXED_SHAPES = (Shape.EMPTY, Shape.CROSS)


def seed_allowed(grid: Grid) -> List[int]:
    """One 4-bit mask per cell, row-major; fixed shapes only try NORTH."""
    allowed: List[int] = []
    for i, j in grid.cells():
        if grid.get_shape(i, j) in FIXED_SHAPES:
            allowed.append(ORIENTATION_BITS[Direction.NORTH])
        else:
            allowed.append(ALL_ORIENTATIONS)
    return allowed


def _mismatch(grid: Grid, i: int, j: int, d: Direction) -> bool:
    return check_edge(grid, i, j, d) == EdgeStatus.MISMATCH


def is_mismatch(grid: Grid, i: int, j: int, d: Direction, allowed: List[int], nb_pieces: int) -> bool:
    """True when piece ``(i, j)`` oriented toward ``d`` cannot be part of a win.

    Only edges toward cells already decided in row-major order are inspected.
    When the reason for rejecting ``d`` can never change during the search
    (a border, a fixed-shape neighbour, two facing endpoints) the bit for
    ``d`` is also cleared from ``allowed`` so later visits skip it.
    """
    rows, cols = grid.rows, grid.cols
    pos = i * cols + j
    bit = ORIENTATION_BITS[d]

    if not grid.wrapping:
        borders = (
            (Direction.NORTH, i == 0),
            (Direction.WEST, j == 0),
            (Direction.SOUTH, i == rows - 1),
            (Direction.EAST, j == cols - 1),
        )
        for side, on_border in borders:
            if on_border and _mismatch(grid, i, j, side):
                allowed[pos] &= ~bit
                return True

    decided = []
    if i >= 1:
        decided.append((Direction.NORTH, (i - 1, j)))
    if j >= 1:
        decided.append((Direction.WEST, (i, j - 1)))
    if grid.wrapping:
        if i == rows - 1:
            decided.append((Direction.SOUTH, (0, j)))
        if j == cols - 1:
            decided.append((Direction.EAST, (i, 0)))

    for side, (ni, nj) in decided:
        if _mismatch(grid, i, j, side):
            if grid.get_shape(ni, nj) in FIXED_SHAPES:
                allowed[pos] &= ~bit
            return True

    # Two endpoints facing each other close off a component of their own.
    if nb_pieces > 2 and grid.get_shape(i, j) == Shape.ENDPOINT:
        nxt = adjacent(grid, i, j, d)
        if nxt is not None and nxt != (i, j) and grid.get_shape(*nxt) == Shape.ENDPOINT:
            allowed[pos] &= ~bit
            return True

    return False


__all__ = ["ORIENTATION_BITS", "ALL_ORIENTATIONS", "seed_allowed", "is_mismatch"]
