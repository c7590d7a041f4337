"""Reading and writing puzzles in the plain-text save format.

::

    <rows> <cols> <wrapping:0|1>
    <shape><dir> <shape><dir> ...      (cols tokens per line, rows lines)
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from config import CFG
from grid import Grid
from models import Direction, Shape
from pieces import parse_token, piece_token

log = logging.getLogger(__name__)


class FormatError(ValueError):
    """Malformed save-file content."""

    def __init__(self, message: str, *, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def _resolve_output_path(base_dir: str, configured_name: str, fallback: str) -> str:
    """Return the absolute path where an output artifact should be written."""

    name = (configured_name or "").strip() or fallback
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir or os.getcwd(), name)


def _parse_header(line: str) -> List[int]:
    parts = line.split()
    if len(parts) != 3:
        raise FormatError(f"header needs 3 integers, got {len(parts)}", line=1)
    try:
        rows, cols, wrapping = (int(p) for p in parts)
    except ValueError:
        raise FormatError(f"non-integer header {line.strip()!r}", line=1) from None
    if rows < 1 or cols < 1:
        raise FormatError(f"invalid size {rows}x{cols}", line=1)
    if wrapping not in (0, 1):
        raise FormatError(f"wrapping flag must be 0 or 1, got {wrapping}", line=1)
    return [rows, cols, wrapping]


def parse_grid(text: str) -> Grid:
    """Build a :class:`Grid` from save-file text; raises :class:`FormatError`."""
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise FormatError("empty input")
    rows, cols, wrapping = _parse_header(lines[0])

    body = lines[1:]
    if len(body) < rows:
        raise FormatError(f"expected {rows} rows of pieces, got {len(body)}")

    shapes: List[Shape] = []
    orientations: List[Direction] = []
    for r in range(rows):
        tokens = body[r].split()
        if len(tokens) != cols:
            raise FormatError(f"expected {cols} pieces, got {len(tokens)}", line=r + 2)
        for tok in tokens:
            try:
                shape, orientation = parse_token(tok)
            except KeyError:
                raise FormatError(f"unrecognized piece {tok!r}", line=r + 2) from None
            shapes.append(shape)
            orientations.append(orientation)

    return Grid(rows, cols, bool(wrapping), shapes, orientations)


def format_grid(grid: Grid) -> str:
    out = [f"{grid.rows} {grid.cols} {int(grid.wrapping)}"]
    for i in range(grid.rows):
        out.append(" ".join(
            piece_token(grid.get_shape(i, j), grid.get_orientation(i, j))
            for j in range(grid.cols)
        ))
    return "\n".join(out) + "\n"


def load_grid(path: str) -> Grid:
    with open(path, "r", encoding="utf-8") as f:
        g = parse_grid(f.read())
    log.info("Game '%s' has been successfully loaded", path)
    return g


def save_grid(grid: Grid, path: Optional[str] = None, base_dir: Optional[str] = None) -> str:
    """Write ``grid`` to ``path`` (default ``CFG.SOLUTION_OUT``) and return the full path."""
    full = _resolve_output_path(base_dir or CFG.SAVE_DIR, path or "", CFG.SOLUTION_OUT)
    parent = os.path.dirname(full)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(full, "w", encoding="utf-8") as f:
        f.write(format_grid(grid))
    log.info("Game was successfully saved as '%s'", full)
    return full


def write_solution_count(count: int, path: str, base_dir: Optional[str] = None) -> str:
    full = _resolve_output_path(base_dir or CFG.SAVE_DIR, path, "solutions.txt")
    parent = os.path.dirname(full)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(full, "w", encoding="utf-8") as f:
        f.write(f"{int(count)}\n")
    log.info("Solution count was successfully saved as '%s'", full)
    return full


__all__ = [
    "FormatError", "parse_grid", "format_grid", "load_grid", "save_grid",
    "write_solution_count",
]
