"""
Board Diagrams - Plain-text rendering of terrain and positions.

Terrain diagram:

       1  2  3  4  5
    m  X  H  X  H  X
    l  R  R  R  R  R
    ...

Position diagram uses piece codes (upper case red, lower case black) and
'.' for empty squares; mountains are always shown as '#'.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .terrain import NUM_COLS, NUM_ROWS, ROW_LETTERS, TERRAIN, Terrain

if TYPE_CHECKING:
    from ..engine_core.state import GameState


def _header() -> str:
    return "   " + "".join(f"{col + 1:>3}" for col in range(NUM_COLS))


def render_terrain() -> str:
    """Render the fixed terrain table."""
    lines = [_header()]
    for row in range(NUM_ROWS):
        cells = TERRAIN[row * NUM_COLS:(row + 1) * NUM_COLS]
        lines.append(f"{ROW_LETTERS[row]:>3}" + "".join(f"{t.code:>3}" for t in cells))
    return "\n".join(lines)


def render_state(state: GameState) -> str:
    """Render a position, with the side to move on the last line."""
    lines = [_header()]
    for row in range(NUM_ROWS):
        cells = []
        for col in range(NUM_COLS):
            index = row * NUM_COLS + col
            piece = state.board[index]
            if piece is not None:
                cells.append(piece.code)
            elif TERRAIN[index] == Terrain.MOUNTAIN:
                cells.append("#")
            else:
                cells.append(".")
        lines.append(f"{ROW_LETTERS[row]:>3}" + "".join(f"{c:>3}" for c in cells))
    lines.append(f"{state.turn.value} to move")
    return "\n".join(lines)
