"""Win conditions: well-paired, connected, won."""

from __future__ import annotations

from typing import List, Optional, Tuple

from edges import adjacent, check_edge
from grid import Grid
from models import Direction, EdgeStatus, Shape


def is_well_paired(grid: Grid) -> bool:
    for i, j in grid.cells():
        for d in Direction:
            if check_edge(grid, i, j, d) == EdgeStatus.MISMATCH:
                return False
    return True


def _first_non_empty(grid: Grid) -> Optional[Tuple[int, int]]:
    for i, j in grid.cells():
        if grid.get_shape(i, j) != Shape.EMPTY:
            return i, j
    return None


def is_connected(grid: Grid) -> bool:
    """True when every non-empty piece is reachable from the first one over MATCH edges."""
    start = _first_non_empty(grid)
    if start is None:
        return True

    cols = grid.cols
    visited: List[bool] = [False] * grid.size
    stack = [start]
    while stack:
        i, j = stack.pop()
        if visited[i * cols + j]:
            continue
        visited[i * cols + j] = True
        for d in Direction:
            if check_edge(grid, i, j, d) != EdgeStatus.MATCH:
                continue
            nxt = adjacent(grid, i, j, d)
            if nxt is not None and not visited[nxt[0] * cols + nxt[1]]:
                stack.append(nxt)

    for i, j in grid.cells():
        if grid.get_shape(i, j) != Shape.EMPTY and not visited[i * cols + j]:
            return False
    return True


def is_won(grid: Grid) -> bool:
    return is_well_paired(grid) and is_connected(grid)


__all__ = ["is_well_paired", "is_connected", "is_won"]
