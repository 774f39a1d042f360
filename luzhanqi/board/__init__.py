"""
Board - Static topology and piece taxonomy.

Everything in this package is read-only data built at import time plus
small pure functions over it:
- Terrain table and square names
- Grid geometry and neighbors
- Per-side regions (HQ, first row, back rows, playable squares)
- Piece kinds, ranks and quotas
"""

from .terrain import (
    NUM_SQUARES,
    NUM_ROWS,
    NUM_COLS,
    TERRAIN,
    Terrain,
    terrain_of,
    squares_of,
    square_name,
    parse_square,
)
from .pieces import Side, PieceKind, Piece, QUOTAS, PIECES_PER_SIDE
from .topology import (
    SideRegion,
    REGIONS,
    region_of,
    owner_of,
    index_to_rc,
    rc_to_index,
    neighbors,
    orthogonal_neighbors,
    diagonal_neighbors,
)

__all__ = [
    "NUM_SQUARES",
    "NUM_ROWS",
    "NUM_COLS",
    "TERRAIN",
    "Terrain",
    "terrain_of",
    "squares_of",
    "square_name",
    "parse_square",
    "Side",
    "PieceKind",
    "Piece",
    "QUOTAS",
    "PIECES_PER_SIDE",
    "SideRegion",
    "REGIONS",
    "region_of",
    "owner_of",
    "index_to_rc",
    "rc_to_index",
    "neighbors",
    "orthogonal_neighbors",
    "diagonal_neighbors",
]
