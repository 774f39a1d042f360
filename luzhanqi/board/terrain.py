"""
Board Terrain - Square types and the fixed terrain table.

Each of the 65 squares has exactly one terrain type:
- EMPTY: no special properties (X)
- RAILROAD: connected corridor; regular pieces move straight any number of
  squares, engineers may reach any connected railroad square (R)
- CAMP: pieces inside cannot be attacked, but can be moved to (C)
- HQ: pieces can move in, but never move out (H)
- FRONTLINE: acts like a railroad, but pieces cannot land on it (F)
- MOUNTAIN: cannot be used (M)

Movement and combat rules are documented here for completeness only; the
starting-position rules only care about the classification.
"""

from __future__ import annotations
from enum import Enum


NUM_ROWS = 13
NUM_COLS = 5
NUM_SQUARES = NUM_ROWS * NUM_COLS

# Row letters from row 0 (far side) to row 12 (near side)
ROW_LETTERS = "mlkjihgfedcba"


class Terrain(Enum):
    """Terrain type of a board square."""
    EMPTY = "empty"
    RAILROAD = "railroad"
    CAMP = "camp"
    HQ = "hq"
    FRONTLINE = "frontline"
    MOUNTAIN = "mountain"

    @property
    def code(self) -> str:
        """Single-letter code used in board diagrams."""
        return _TERRAIN_CODES[self]


_TERRAIN_CODES = {
    Terrain.EMPTY: "X",
    Terrain.RAILROAD: "R",
    Terrain.CAMP: "C",
    Terrain.HQ: "H",
    Terrain.FRONTLINE: "F",
    Terrain.MOUNTAIN: "M",
}

_CODE_TO_TERRAIN = {code: terrain for terrain, code in _TERRAIN_CODES.items()}

# Layout, one string per row (row 0 first):
#
#    1       2       3       4       5
# m  X 00    H 01    X 02    H 03    X 04
# l  R 05    R 06    R 07    R 08    R 09
# k  R 10    C 11    X 12    C 13    R 14
# j  R 15    X 16    C 17    X 18    R 19
# i  R 20    C 21    X 22    C 23    R 24
# h  R 25    R 26    R 27    R 28    R 29
# g  F 30    M 31    F 32    M 33    F 34
# f  R 35    R 36    R 37    R 38    R 39
# e  R 40    C 41    X 42    C 43    R 44
# d  R 45    X 46    C 47    X 48    R 49
# c  R 50    C 51    X 52    C 53    R 54
# b  R 55    R 56    R 57    R 58    R 59
# a  X 60    H 61    X 62    H 63    X 64
_LAYOUT = (
    "XHXHX",
    "RRRRR",
    "RCXCR",
    "RXCXR",
    "RCXCR",
    "RRRRR",
    "FMFMF",
    "RRRRR",
    "RCXCR",
    "RXCXR",
    "RCXCR",
    "RRRRR",
    "XHXHX",
)

TERRAIN: tuple[Terrain, ...] = tuple(
    _CODE_TO_TERRAIN[code] for row in _LAYOUT for code in row
)

# Terrain types a piece may occupy in a starting position
STARTING_TERRAIN = frozenset({Terrain.EMPTY, Terrain.RAILROAD, Terrain.HQ})


def terrain_of(index: int) -> Terrain:
    """Get the terrain of a square."""
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")
    return TERRAIN[index]


def squares_of(terrain: Terrain) -> tuple[int, ...]:
    """All square indices with the given terrain, ascending."""
    return tuple(i for i, t in enumerate(TERRAIN) if t == terrain)


def square_name(index: int) -> str:
    """Algebraic name of a square, e.g. 0 -> 'm1', 64 -> 'a5'."""
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")
    row, col = divmod(index, NUM_COLS)
    return f"{ROW_LETTERS[row]}{col + 1}"


def parse_square(name: str) -> int:
    """Convert an algebraic square name back to its index."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in ROW_LETTERS or not text[1].isdigit():
        raise ValueError(f"Unknown square name: {name!r}")
    col = int(text[1]) - 1
    if not 0 <= col < NUM_COLS:
        raise ValueError(f"Unknown square name: {name!r}")
    return ROW_LETTERS.index(text[0]) * NUM_COLS + col
