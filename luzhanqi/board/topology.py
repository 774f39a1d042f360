"""
Board Topology - Square geometry and per-side regions.

Squares are indexed row-major over 13 rows x 5 columns. Row 0 is the far
(black) side, row 12 the near (red) side, row 6 the frontline between them.

The per-side regions are derived once from the terrain table and never
change afterwards:
- hq: the two headquarters squares
- first_row: the row directly behind the frontline
- back_rows: the two rows farthest from the frontline
- playable: every empty, railroad or HQ square on the side (camps are
  reachable in play but never used as starting squares)
"""

from __future__ import annotations
from dataclasses import dataclass

from .pieces import PIECES_PER_SIDE, Side
from .terrain import (
    NUM_COLS,
    NUM_ROWS,
    NUM_SQUARES,
    STARTING_TERRAIN,
    TERRAIN,
    Terrain,
)


FRONTLINE_ROW = 6

# Rows owned by each side, ordered from the frontline outwards
SIDE_ROWS = {
    Side.RED: (7, 8, 9, 10, 11, 12),
    Side.BLACK: (5, 4, 3, 2, 1, 0),
}


def index_to_rc(index: int) -> tuple[int, int]:
    """Convert a square index to (row, column)."""
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")
    return divmod(index, NUM_COLS)


def rc_to_index(row: int, col: int) -> int | None:
    """Convert (row, column) to a square index, or None off the board."""
    if 0 <= row < NUM_ROWS and 0 <= col < NUM_COLS:
        return row * NUM_COLS + col
    return None


def _step(index: int, d_row: int, d_col: int) -> int | None:
    row, col = index_to_rc(index)
    return rc_to_index(row + d_row, col + d_col)


def up(index: int) -> int | None:
    return _step(index, -1, 0)


def down(index: int) -> int | None:
    return _step(index, 1, 0)


def left(index: int) -> int | None:
    return _step(index, 0, -1)


def right(index: int) -> int | None:
    return _step(index, 0, 1)


def up_left(index: int) -> int | None:
    return _step(index, -1, -1)


def up_right(index: int) -> int | None:
    return _step(index, -1, 1)


def down_left(index: int) -> int | None:
    return _step(index, 1, -1)


def down_right(index: int) -> int | None:
    return _step(index, 1, 1)


def orthogonal_neighbors(index: int) -> tuple[int, ...]:
    """Existing up/down/left/right neighbors."""
    steps = (up(index), down(index), left(index), right(index))
    return tuple(sq for sq in steps if sq is not None)


def diagonal_neighbors(index: int) -> tuple[int, ...]:
    """Existing diagonal neighbors."""
    steps = (up_left(index), up_right(index), down_left(index), down_right(index))
    return tuple(sq for sq in steps if sq is not None)


def neighbors(index: int) -> tuple[int, ...]:
    """All existing orthogonal and diagonal neighbors."""
    return orthogonal_neighbors(index) + diagonal_neighbors(index)


def row_squares(row: int) -> tuple[int, ...]:
    """Square indices of one row, left to right."""
    return tuple(row * NUM_COLS + col for col in range(NUM_COLS))


@dataclass(frozen=True)
class SideRegion:
    """Fixed square subsets belonging to one side."""
    side: Side
    squares: frozenset[int]
    hq: frozenset[int]
    first_row: frozenset[int]
    back_rows: frozenset[int]
    playable: frozenset[int]

    def owns(self, index: int) -> bool:
        """Whether the square lies on this side's half."""
        return index in self.squares


def _build_region(side: Side) -> SideRegion:
    rows = SIDE_ROWS[side]
    squares = frozenset(sq for row in rows for sq in row_squares(row))
    return SideRegion(
        side=side,
        squares=squares,
        hq=frozenset(sq for sq in squares if TERRAIN[sq] == Terrain.HQ),
        first_row=frozenset(row_squares(rows[0])),
        back_rows=frozenset(row_squares(rows[-1]) + row_squares(rows[-2])),
        playable=frozenset(sq for sq in squares if TERRAIN[sq] in STARTING_TERRAIN),
    )


REGIONS: dict[Side, SideRegion] = {side: _build_region(side) for side in Side}


def _check_regions() -> None:
    for region in REGIONS.values():
        assert len(region.hq) == 2, f"{region.side.value}: expected 2 HQ squares"
        assert len(region.first_row) == NUM_COLS
        assert len(region.back_rows) == 2 * NUM_COLS
        assert len(region.playable) == PIECES_PER_SIDE, (
            f"{region.side.value}: {len(region.playable)} playable squares "
            f"for {PIECES_PER_SIDE} pieces"
        )
        assert region.hq <= region.back_rows <= region.squares
    assert not (REGIONS[Side.RED].squares & REGIONS[Side.BLACK].squares)


_check_regions()


def region_of(side: Side) -> SideRegion:
    """Get the fixed region for a side."""
    return REGIONS[side]


def owner_of(index: int) -> Side | None:
    """Which side's half a square lies on (None for the frontline row)."""
    for side, region in REGIONS.items():
        if region.owns(index):
            return side
    return None
