"""Piece codec: (shape, orientation) <-> half-edge mask, plus glyph/char tables."""

from __future__ import annotations

from typing import Dict, List, Tuple

from models import Direction, Shape

N_B = 1 << Direction.NORTH
E_B = 1 << Direction.EAST
S_B = 1 << Direction.SOUTH
W_B = 1 << Direction.WEST

# Indexed [shape][orientation]; bit d is set iff the piece exposes a half-edge toward d.
_CODE: List[List[int]] = [
    [0, 0, 0, 0],                                              # EMPTY
    [N_B, E_B, S_B, W_B],                                      # ENDPOINT
    [N_B | S_B, E_B | W_B, N_B | S_B, E_B | W_B],              # SEGMENT
    [N_B | E_B, E_B | S_B, S_B | W_B, W_B | N_B],              # CORNER
    [N_B | E_B | W_B, N_B | E_B | S_B, E_B | S_B | W_B, N_B | S_B | W_B],  # TEE
    [0b1111, 0b1111, 0b1111, 0b1111],                          # CROSS
]


def encode(shape: Shape, orientation: Direction) -> int:
    return _CODE[shape][orientation]


def decode(mask: int) -> Tuple[Shape, Direction]:
    """Return the first (shape, orientation) pair whose mask equals ``mask``.

    Equivalent orientations (Empty, Cross, opposite Segments) decode to the
    lowest direction.  Raises ``ValueError`` when no piece encodes ``mask``.
    """
    if not 0 <= mask < 16:
        raise ValueError(f"no piece encodes mask {mask!r}")
    for shape in Shape:
        for orientation in Direction:
            if _CODE[shape][orientation] == mask:
                return shape, orientation
    raise ValueError(f"no piece encodes mask {mask:04b}")


def has_half_edge(shape: Shape, orientation: Direction, direction: Direction) -> bool:
    if shape == Shape.EMPTY:
        return False
    if shape == Shape.ENDPOINT:
        return direction == orientation
    if shape == Shape.SEGMENT:
        return direction == orientation or direction == (orientation + 2) % 4
    if shape == Shape.CORNER:
        return direction == orientation or direction == (orientation + 1) % 4
    if shape == Shape.TEE:
        return direction != (orientation + 2) % 4
    if shape == Shape.CROSS:
        return True
    raise ValueError(f"invalid shape: {shape!r}")


# ---------- persisted-format characters ----------

SHAPE_CHARS: Dict[Shape, str] = {
    Shape.EMPTY: "E",
    Shape.ENDPOINT: "N",
    Shape.SEGMENT: "S",
    Shape.CORNER: "C",
    Shape.TEE: "T",
    Shape.CROSS: "X",
}
DIRECTION_CHARS: Dict[Direction, str] = {
    Direction.NORTH: "N",
    Direction.EAST: "E",
    Direction.SOUTH: "S",
    Direction.WEST: "W",
}
CHAR_TO_SHAPE: Dict[str, Shape] = {c: s for s, c in SHAPE_CHARS.items()}
CHAR_TO_DIRECTION: Dict[str, Direction] = {c: d for d, c in DIRECTION_CHARS.items()}


def piece_token(shape: Shape, orientation: Direction) -> str:
    return SHAPE_CHARS[shape] + DIRECTION_CHARS[orientation]


def parse_token(token: str) -> Tuple[Shape, Direction]:
    """Decode a two-character save token such as ``"CW"``.

    Unknown characters raise ``KeyError``; the I/O layer reports them.
    """
    if len(token) != 2:
        raise KeyError(token)
    return CHAR_TO_SHAPE[token[0]], CHAR_TO_DIRECTION[token[1]]


# ---------- board glyphs ----------

_GLYPHS: List[List[str]] = [
    [" ", " ", " ", " "],  # empty
    ["^", ">", "v", "<"],  # endpoint
    ["|", "-", "|", "-"],  # segment
    ["└", "┌", "┐", "┘"],  # corner
    ["┴", "├", "┬", "┤"],  # tee
    ["+", "+", "+", "+"],  # cross
]


def glyph(shape: Shape, orientation: Direction) -> str:
    return _GLYPHS[shape][orientation]


__all__ = [
    "encode", "decode", "has_half_edge",
    "SHAPE_CHARS", "DIRECTION_CHARS", "CHAR_TO_SHAPE", "CHAR_TO_DIRECTION",
    "piece_token", "parse_token", "glyph",
]
