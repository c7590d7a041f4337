"""Neighbour lookup and three-way edge status between adjacent cells."""

from __future__ import annotations

from typing import Optional, Tuple

from grid import Grid
from models import DIR_OFFSETS, Direction, EdgeStatus
import pieces


def adjacent(grid: Grid, i: int, j: int, d: Direction) -> Optional[Tuple[int, int]]:
    """Return the cell next to ``(i, j)`` in direction ``d``, or ``None`` off the border.

    On a wrapping grid the result is reduced modulo the grid size and is never
    ``None``.
    """
    if not (0 <= i < grid.rows and 0 <= j < grid.cols):
        raise IndexError(f"cell ({i}, {j}) outside {grid.rows}x{grid.cols} grid")
    di, dj = DIR_OFFSETS[Direction(d)]
    ii = i + di
    jj = j + dj
    if grid.wrapping:
        ii %= grid.rows
        jj %= grid.cols
    if ii < 0 or ii >= grid.rows or jj < 0 or jj >= grid.cols:
        return None
    return ii, jj


def has_half_edge(grid: Grid, i: int, j: int, d: Direction) -> bool:
    return pieces.has_half_edge(grid.get_shape(i, j), grid.get_orientation(i, j), d)


def check_edge(grid: Grid, i: int, j: int, d: Direction) -> EdgeStatus:
    d = Direction(d)
    here = has_half_edge(grid, i, j, d)
    nxt = adjacent(grid, i, j, d)
    there = nxt is not None and has_half_edge(grid, nxt[0], nxt[1], d.opposite())
    if here and there:
        return EdgeStatus.MATCH
    if here or there:
        return EdgeStatus.MISMATCH
    return EdgeStatus.NOEDGE


__all__ = ["adjacent", "has_half_edge", "check_edge"]
