from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class Shape(IntEnum):
    EMPTY = 0
    ENDPOINT = 1
    SEGMENT = 2
    CORNER = 3
    TEE = 4
    CROSS = 5


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    def cw(self) -> "Direction":
        return Direction((self + 1) % 4)

    def ccw(self) -> "Direction":
        return Direction((self + 3) % 4)

    @property
    def offset(self) -> Tuple[int, int]:
        return DIR_OFFSETS[self]


# (row, col) step per direction
DIR_OFFSETS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

NB_SHAPES = len(Shape)
NB_DIRS = len(Direction)


class EdgeStatus(Enum):
    NOEDGE = "noedge"
    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass
class Piece:
    shape: Shape = Shape.EMPTY
    orientation: Direction = Direction.NORTH


@dataclass(frozen=True)
class Move:
    i: int
    j: int
    old: Direction
    new: Direction


def as_shape(value) -> Shape:
    """Coerce ``value`` into a :class:`Shape`, raising ``ValueError`` if invalid."""
    try:
        return Shape(value)
    except ValueError:
        raise ValueError(f"invalid shape: {value!r}") from None


def as_direction(value) -> Direction:
    """Coerce ``value`` into a :class:`Direction`, raising ``ValueError`` if invalid."""
    try:
        return Direction(value)
    except ValueError:
        raise ValueError(f"invalid direction: {value!r}") from None
