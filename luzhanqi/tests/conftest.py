"""
Pytest fixtures for Luzhanqi tests.
"""

import pytest

from ..board.pieces import Piece, PieceKind, Side
from ..engine_core.state import GameState
from ..api.service import APIService


# Kinds without a placement rule of their own, in taxonomy order
_FREE_KINDS = [
    kind
    for kind in PieceKind
    if kind not in (PieceKind.FLAG, PieceKind.LANDMINE, PieceKind.BOMB)
    for _ in range(kind.quota)
]

# Hand-built legal layout per side: flag, landmines, bombs, then the
# remaining kinds over the remaining playable squares in ascending order.
_LAYOUTS = {
    Side.RED: {
        "flag": [61],
        "landmine": [60, 62, 64],
        "bomb": [55, 56],
        "rest": [35, 36, 37, 38, 39, 40, 42, 44, 45, 46, 48, 49, 50, 52, 54, 57, 58, 59, 63],
    },
    Side.BLACK: {
        "flag": [1],
        "landmine": [0, 2, 4],
        "bomb": [5, 6],
        "rest": [3, 7, 8, 9, 10, 12, 14, 15, 16, 18, 19, 20, 22, 24, 25, 26, 27, 28, 29],
    },
}


def _build_legal_state() -> GameState:
    board = [None] * 65
    for side, layout in _LAYOUTS.items():
        for sq in layout["flag"]:
            board[sq] = Piece(PieceKind.FLAG, side)
        for sq in layout["landmine"]:
            board[sq] = Piece(PieceKind.LANDMINE, side)
        for sq in layout["bomb"]:
            board[sq] = Piece(PieceKind.BOMB, side)
        for sq, kind in zip(layout["rest"], _FREE_KINDS):
            board[sq] = Piece(kind, side)
    return GameState(turn=Side.RED, board=board)


def swap(state: GameState, a: int, b: int) -> GameState:
    """Return state with the contents of two squares exchanged."""
    piece_a, piece_b = state.piece_at(a), state.piece_at(b)
    return state.with_square(a, piece_b).with_square(b, piece_a)


@pytest.fixture
def legal_state() -> GameState:
    """A hand-built legal starting position.

    Red: flag 61 (a2), landmines 60/62/64, bombs 55/56, overall 35,
    engineer 63.
    Black: flag 1 (m2), landmines 0/2/4, bombs 5/6, overall 3.
    """
    return _build_legal_state()


@pytest.fixture
def swap_squares():
    """Helper exchanging two squares of a state."""
    return swap


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service."""
    return APIService()
