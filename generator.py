"""Random puzzle generation by growing a spanning tree of matched edges."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from config import CFG
from edges import adjacent, check_edge, has_half_edge
from grid import Grid
from models import Direction, EdgeStatus, Shape
import pieces

log = logging.getLogger(__name__)

Candidate = Tuple[int, int, Direction]


def _default_rng() -> random.Random:
    if CFG.RANDOM_SEED >= 0:
        return random.Random(CFG.RANDOM_SEED)
    return random.Random()


def add_half_edge(grid: Grid, i: int, j: int, d: Direction) -> None:
    """Add a connector toward ``d`` to piece ``(i, j)``, re-deriving its shape."""
    code = pieces.encode(grid.get_shape(i, j), grid.get_orientation(i, j))
    bit = 1 << Direction(d)
    if code & bit:
        raise ValueError(f"piece ({i}, {j}) already has a half-edge toward {Direction(d).name}")
    shape, orientation = pieces.decode(code | bit)
    grid.set_shape(i, j, shape)
    grid.set_orientation(i, j, orientation)


def add_edge(grid: Grid, i: int, j: int, d: Direction) -> bool:
    """Join ``(i, j)`` and its neighbour toward ``d``; False if that is impossible."""
    d = Direction(d)
    nxt = adjacent(grid, i, j, d)
    if nxt is None or nxt == (i, j):
        return False
    if has_half_edge(grid, i, j, d):
        return False
    if has_half_edge(grid, nxt[0], nxt[1], d.opposite()):
        return False
    add_half_edge(grid, i, j, d)
    add_half_edge(grid, nxt[0], nxt[1], d.opposite())
    return True


def _growth_candidates(grid: Grid) -> List[Candidate]:
    out: List[Candidate] = []
    for i, j in grid.cells():
        if grid.get_shape(i, j) == Shape.EMPTY:
            continue
        for d in Direction:
            nxt = adjacent(grid, i, j, d)
            if nxt is not None and nxt != (i, j) and grid.get_shape(*nxt) == Shape.EMPTY:
                out.append((i, j, d))
    return out


def _extra_candidates(grid: Grid) -> List[Candidate]:
    out: List[Candidate] = []
    for i, j in grid.cells():
        if grid.get_shape(i, j) == Shape.EMPTY:
            continue
        for d in Direction:
            nxt = adjacent(grid, i, j, d)
            if nxt is None or nxt == (i, j) or grid.get_shape(*nxt) == Shape.EMPTY:
                continue
            if check_edge(grid, i, j, d) == EdgeStatus.NOEDGE:
                out.append((i, j, d))
    return out


def random_grid(
    rows: int,
    cols: int,
    wrapping: bool = False,
    nb_empty: int = 0,
    nb_extra: int = 0,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Build a solved random puzzle.

    ``rows * cols - nb_empty`` cells are linked by a random spanning tree of
    matched edges, then ``nb_extra`` additional edges are added between
    non-empty cells.  The returned grid is always won; shuffle it to get a
    playable puzzle.
    """
    size = rows * cols
    if size < 2:
        raise ValueError("a random grid needs at least 2 cells")
    if nb_empty < 0 or nb_empty > size - 2:
        raise ValueError(f"nb_empty must be in [0, {size - 2}], got {nb_empty}")
    if nb_extra < 0:
        raise ValueError(f"nb_extra must be non-negative, got {nb_extra}")
    rng = rng or _default_rng()

    g = Grid(rows, cols, wrapping)
    target = size - nb_empty

    while True:
        i, j = rng.randrange(rows), rng.randrange(cols)
        if add_edge(g, i, j, Direction(rng.randrange(4))):
            break

    for _ in range(2, target):
        i, j, d = rng.choice(_growth_candidates(g))
        add_edge(g, i, j, d)

    for n in range(nb_extra):
        candidates = _extra_candidates(g)
        if not candidates:
            raise ValueError(f"cannot place extra edge {n + 1} of {nb_extra}: grid is saturated")
        i, j, d = rng.choice(candidates)
        add_edge(g, i, j, d)

    log.debug(
        "random grid %dx%d wrapping=%s empty=%d extra=%d",
        rows, cols, wrapping, nb_empty, nb_extra,
    )
    return g


__all__ = ["add_half_edge", "add_edge", "random_grid"]
