"""
Pydantic Schemas - Structural form of positions for host applications.

These models define the contract between a host (UI editor, bridge
layer) and the engine. A position travels as:

    {"turn": "red", "board": [null, {"kind": "flag", "side": "black"}, ...]}

Error Codes:
- INVALID_STATE: Payload does not describe a game state (wrong shape,
  unknown enum values)
- ILLEGAL_START: Payload is a game state but not a legal start
- INVALID_SEED: Seed outside the unsigned 64-bit range
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from ..board.pieces import Piece, PieceKind, Side
from ..engine_core.rng import MAX_SEED
from ..engine_core.state import GameState


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_STATE = "INVALID_STATE"
    ILLEGAL_START = "ILLEGAL_START"
    INVALID_SEED = "INVALID_SEED"


# =============================================================================
# Position Models
# =============================================================================

class PieceModel(BaseModel):
    """A piece: kind plus owning side."""
    kind: PieceKind
    side: Side

    model_config = {"frozen": True}

    def to_piece(self) -> Piece:
        return Piece(kind=self.kind, side=self.side)


class GameStateModel(BaseModel):
    """
    A full position in structural form.

    The board length is deliberately not constrained here so that an
    editor can submit a wrong-sized board and get a validation answer
    instead of a schema error.
    """
    turn: Side = Side.RED
    board: list[Optional[PieceModel]] = Field(
        description="One entry per square, index 0 = m1 ... index 64 = a5",
    )

    @classmethod
    def from_state(cls, state: GameState) -> GameStateModel:
        return cls(
            turn=state.turn,
            board=[
                None if piece is None else PieceModel(kind=piece.kind, side=piece.side)
                for piece in state.board
            ],
        )

    def to_state(self) -> GameState:
        return GameState(
            turn=self.turn,
            board=[None if entry is None else entry.to_piece() for entry in self.board],
        )


# =============================================================================
# Board Info Models
# =============================================================================

class SquareInfo(BaseModel):
    """Static information about one square."""
    index: int = Field(ge=0, le=64)
    name: str
    row: int
    col: int
    terrain: str
    owner: Optional[Side] = None


class RegionInfo(BaseModel):
    """Fixed square subsets of one side."""
    side: Side
    hq: list[int]
    first_row: list[int]
    back_rows: list[int]
    playable: list[int]


class PieceKindInfo(BaseModel):
    """Rank and quota of a piece kind."""
    kind: PieceKind
    code: str
    rank: int
    quota: int


# =============================================================================
# Request Models
# =============================================================================

class GenerateStartRequest(BaseModel):
    """Request a generated starting position."""
    seed: int = Field(ge=0, le=MAX_SEED, description="Unsigned 64-bit seed")


class ValidateStartRequest(BaseModel):
    """Request validation of a position."""
    state: GameStateModel


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """A generated starting position."""
    seed: int
    legal: bool
    state: GameStateModel


class ValidationResponse(BaseModel):
    """Legality verdict for a position."""
    legal: bool
    errors: list[str] = Field(default_factory=list)
    error_code: Optional[ErrorCode] = None


class BoardResponse(BaseModel):
    """Static board description."""
    rows: int
    cols: int
    squares: list[SquareInfo]
    regions: list[RegionInfo]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
