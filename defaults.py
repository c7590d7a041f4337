# defaults.py — the built-in 5x5 puzzle and its solution
from __future__ import annotations

from typing import List

from config import CFG
from grid import Grid
from models import Direction, Shape

_E, _N, _S, _C, _T, _X = (
    Shape.EMPTY, Shape.ENDPOINT, Shape.SEGMENT, Shape.CORNER, Shape.TEE, Shape.CROSS,
)
_DN, _DE, _DS, _DW = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

DEFAULT_SHAPES: List[Shape] = [
    _C, _N, _N, _C, _N,  # row 0
    _T, _T, _T, _T, _T,  # row 1
    _N, _N, _T, _N, _S,  # row 2
    _N, _T, _T, _C, _S,  # row 3
    _N, _T, _N, _N, _N,  # row 4
]

DEFAULT_ORIENTATIONS: List[Direction] = [
    _DW, _DN, _DW, _DN, _DS,  # row 0
    _DS, _DW, _DN, _DE, _DE,  # row 1
    _DE, _DN, _DW, _DW, _DE,  # row 2
    _DS, _DS, _DN, _DW, _DN,  # row 3
    _DE, _DW, _DS, _DE, _DS,  # row 4
]

DEFAULT_SOLUTION: List[Direction] = [
    _DE, _DW, _DE, _DS, _DS,  # row 0
    _DE, _DS, _DS, _DN, _DW,  # row 1
    _DN, _DN, _DE, _DW, _DS,  # row 2
    _DE, _DS, _DN, _DS, _DN,  # row 3
    _DE, _DN, _DW, _DN, _DN,  # row 4
]

# The tables above are laid out for a 5x5 board.
_DEFAULT_DIM = 5


def default_grid() -> Grid:
    return Grid(_DEFAULT_DIM, _DEFAULT_DIM, False, DEFAULT_SHAPES, DEFAULT_ORIENTATIONS)


def default_solution() -> Grid:
    return Grid(_DEFAULT_DIM, _DEFAULT_DIM, False, DEFAULT_SHAPES, DEFAULT_SOLUTION)


def empty_grid(wrapping: bool = False) -> Grid:
    """Square all-empty grid of the configured default size."""
    return Grid(CFG.DEFAULT_SIZE, CFG.DEFAULT_SIZE, wrapping)


__all__ = [
    "DEFAULT_SHAPES", "DEFAULT_ORIENTATIONS", "DEFAULT_SOLUTION",
    "default_grid", "default_solution", "empty_grid",
]
