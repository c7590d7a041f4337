# solver/backtracking.py — exhaustive orientation search (first solution or count)
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Tuple

from config import CFG
from grid import Grid
from models import Direction
from progress import grid_label, set_done, set_nodes, start_run
from rules import is_won
from solver.masks import ORIENTATION_BITS, is_mismatch, seed_allowed

log = logging.getLogger(__name__)


@dataclass
class SearchStats:
    nodes: int = 0        # orientations tried
    leaves: int = 0       # complete assignments checked with is_won
    solutions: int = 0
    elapsed: float = 0.0


def search(work: Grid, allowed: List[int], count_all: bool, stats: SearchStats) -> int:
    """Depth-first search over row-major cells of ``work``.

    ``allowed`` holds one orientation mask per cell and may lose bits as the
    search proves orientations useless.  With ``count_all`` false the search
    stops at the first winning assignment and leaves ``work`` in that state;
    otherwise it walks every branch.  Returns the number of winning
    assignments found.
    """
    size = work.size
    cols = work.cols
    nb_pieces = work.non_empty_count()
    every = max(1, int(CFG.PROGRESS_EVERY))

    # next_dir[pos] is the next direction index to try at position pos
    next_dir = [0] * (size + 1)
    pos = 0
    while pos >= 0:
        if pos == size:
            stats.leaves += 1
            if is_won(work):
                stats.solutions += 1
                if not count_all:
                    return stats.solutions
            pos -= 1
            continue

        i, j = divmod(pos, cols)
        accepted = False
        while next_dir[pos] < 4:
            d = next_dir[pos]
            next_dir[pos] += 1
            if not allowed[pos] & ORIENTATION_BITS[d]:
                continue
            work.set_orientation(i, j, Direction(d))
            stats.nodes += 1
            if stats.nodes % every == 0:
                set_nodes(stats.nodes, stats.solutions)
            if not is_mismatch(work, i, j, Direction(d), allowed, nb_pieces):
                accepted = True
                break

        if accepted:
            pos += 1
            next_dir[pos] = 0
        else:
            next_dir[pos] = 0
            pos -= 1

    return stats.solutions


def _run(grid: Grid, count_all: bool) -> Tuple[Grid, SearchStats]:
    work = grid.copy()
    allowed = seed_allowed(work)
    stats = SearchStats()
    t0 = time.perf_counter()
    search(work, allowed, count_all, stats)
    stats.elapsed = time.perf_counter() - t0
    log.debug(
        "search %s: nodes=%d leaves=%d solutions=%d in %.3fs",
        "count" if count_all else "solve",
        stats.nodes, stats.leaves, stats.solutions, stats.elapsed,
    )
    return work, stats


def solve(grid: Grid) -> bool:
    """Orient ``grid`` into a winning state.

    An already-won grid is accepted as is.  Otherwise the search runs on a
    copy; on success every shape and orientation is copied back, on failure
    ``grid`` is left untouched.
    """
    start_run("solve", grid_label(grid.rows, grid.cols, grid.wrapping))
    if is_won(grid):
        set_done(True, status="Solved", solutions=1, message="already won")
        return True

    work, stats = _run(grid, count_all=False)
    if stats.solutions:
        grid.assign_from(work)
        set_done(True, status="Solved", nodes=stats.nodes, solutions=stats.solutions)
        return True

    set_done(False, status="NoSolution", nodes=stats.nodes, solutions=0)
    return False


def count_solutions(grid: Grid) -> int:
    """Number of orientation assignments that win; ``grid`` is never modified."""
    start_run("count", grid_label(grid.rows, grid.cols, grid.wrapping))
    _work, stats = _run(grid, count_all=True)
    set_done(True, status="Counted", nodes=stats.nodes, solutions=stats.solutions)
    return stats.solutions


__all__ = ["SearchStats", "search", "solve", "count_solutions"]
