"""Move history (undo/redo stacks) and the orientation-changing moves."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, List, Optional

from models import Direction, Move, NB_DIRS

if TYPE_CHECKING:
    from grid import Grid

log = logging.getLogger(__name__)


class History:
    """Two LIFO stacks of :class:`Move`; pushing a fresh move empties ``redo``."""

    __slots__ = ("undo_stack", "redo_stack")

    def __init__(self) -> None:
        self.undo_stack: List[Move] = []
        self.redo_stack: List[Move] = []

    def record(self, move: Move) -> None:
        self.redo_stack.clear()
        self.undo_stack.append(move)

    def pop_undo(self) -> Optional[Move]:
        if not self.undo_stack:
            return None
        move = self.undo_stack.pop()
        self.redo_stack.append(move)
        return move

    def pop_redo(self) -> Optional[Move]:
        if not self.redo_stack:
            return None
        move = self.redo_stack.pop()
        self.undo_stack.append(move)
        return move

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)


def play_move(grid: "Grid", i: int, j: int, quarter_turns: int) -> Move:
    """Rotate piece ``(i, j)`` by a signed number of clockwise quarter turns."""
    old = grid.get_orientation(i, j)
    new = Direction((old + int(quarter_turns)) % NB_DIRS)
    grid.set_orientation(i, j, new)
    move = Move(i, j, old, new)
    grid.history.record(move)
    return move


def undo(grid: "Grid") -> bool:
    move = grid.history.pop_undo()
    if move is None:
        log.info("Nothing to undo.")
        return False
    grid.set_orientation(move.i, move.j, move.old)
    return True


def redo(grid: "Grid") -> bool:
    move = grid.history.pop_redo()
    if move is None:
        log.info("Nothing to redo.")
        return False
    grid.set_orientation(move.i, move.j, move.new)
    return True


def reset_orientation(grid: "Grid") -> None:
    for i, j in grid.cells():
        grid.set_orientation(i, j, Direction.NORTH)
    grid.history.clear()


def shuffle_orientation(grid: "Grid", rng: Optional[random.Random] = None) -> None:
    """Give every piece a uniformly random orientation drawn from ``rng``."""
    rng = rng or random
    for i, j in grid.cells():
        grid.set_orientation(i, j, Direction(rng.randrange(NB_DIRS)))
    grid.history.clear()


__all__ = [
    "History", "play_move", "undo", "redo", "reset_orientation", "shuffle_orientation",
]
