from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from history import History
from models import Direction, Piece, Shape, as_direction, as_shape


class Grid:
    """Rectangular (optionally toroidal) array of pieces plus its move history.

    Cells are stored row-major.  Every accessor validates its coordinates and
    raises ``IndexError`` for cells outside ``[0, rows) x [0, cols)``.
    """

    __slots__ = ("_rows", "_cols", "_wrapping", "_shapes", "_orientations", "history")

    def __init__(
        self,
        rows: int,
        cols: int,
        wrapping: bool = False,
        shapes: Optional[Sequence[Shape]] = None,
        orientations: Optional[Sequence[Direction]] = None,
    ) -> None:
        rows = int(rows)
        cols = int(cols)
        if rows < 1 or cols < 1:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        size = rows * cols
        self._rows = rows
        self._cols = cols
        self._wrapping = bool(wrapping)

        if shapes is None:
            self._shapes: List[Shape] = [Shape.EMPTY] * size
        else:
            if len(shapes) != size:
                raise ValueError(f"expected {size} shapes, got {len(shapes)}")
            self._shapes = [as_shape(s) for s in shapes]

        if orientations is None:
            self._orientations: List[Direction] = [Direction.NORTH] * size
        else:
            if len(orientations) != size:
                raise ValueError(f"expected {size} orientations, got {len(orientations)}")
            self._orientations = [as_direction(o) for o in orientations]

        self.history = History()

    # ---------- dimensions ----------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def wrapping(self) -> bool:
        return self._wrapping

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"cell ({i}, {j}) outside {self._rows}x{self._cols} grid")
        return i * self._cols + j

    def cells(self) -> Iterator[Tuple[int, int]]:
        for i in range(self._rows):
            for j in range(self._cols):
                yield i, j

    # ---------- pieces ----------

    def get_shape(self, i: int, j: int) -> Shape:
        return self._shapes[self._index(i, j)]

    def set_shape(self, i: int, j: int, shape: Shape) -> None:
        self._shapes[self._index(i, j)] = as_shape(shape)

    def get_orientation(self, i: int, j: int) -> Direction:
        return self._orientations[self._index(i, j)]

    def set_orientation(self, i: int, j: int, orientation: Direction) -> None:
        self._orientations[self._index(i, j)] = as_direction(orientation)

    def piece(self, i: int, j: int) -> Piece:
        idx = self._index(i, j)
        return Piece(self._shapes[idx], self._orientations[idx])

    @property
    def shapes(self) -> List[Shape]:
        return list(self._shapes)

    @property
    def orientations(self) -> List[Direction]:
        return list(self._orientations)

    def non_empty_count(self) -> int:
        return sum(1 for s in self._shapes if s != Shape.EMPTY)

    # ---------- copy / compare ----------

    def copy(self) -> "Grid":
        """Full shape and orientation copy; the copy starts with empty history."""
        return Grid(self._rows, self._cols, self._wrapping, self._shapes, self._orientations)

    def assign_from(self, other: "Grid") -> None:
        """Overwrite every shape and orientation with those of a same-sized grid."""
        if (other.rows, other.cols) != (self._rows, self._cols):
            raise ValueError("grids differ in size")
        for i, j in self.cells():
            self.set_shape(i, j, other.get_shape(i, j))
            self.set_orientation(i, j, other.get_orientation(i, j))

    def equal(self, other: "Grid", ignore_orientation: bool = False) -> bool:
        if self._rows != other.rows or self._cols != other.cols:
            return False
        if self._wrapping != other.wrapping:
            return False
        if self._shapes != other.shapes:
            return False
        if not ignore_orientation and self._orientations != other.orientations:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols}, wrapping={self._wrapping})"


__all__ = ["Grid"]
