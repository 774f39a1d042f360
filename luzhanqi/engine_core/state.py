"""
Game State - Side to move plus the occupant of every square.

Design principles:
- Immutable-friendly: helpers return new state, never mutate in place
- Serializable: converts to/from a plain structural dict for hosts
- Permissive: any board sequence can be wrapped so the validator can
  judge externally supplied (possibly malformed) positions
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from typing import Any, Iterator

from ..board.pieces import Piece, PieceKind, Side
from ..board.terrain import NUM_SQUARES


class StateDecodeError(ValueError):
    """Raised when a structural dict does not describe a game state."""


def _empty_board() -> list[Piece | None]:
    return [None] * NUM_SQUARES


@dataclass
class GameState:
    """
    A board position before play begins.

    board[i] is the piece on square i, or None when the square is empty.
    The core never edits a state in place; generated states are built
    wholesale and edits go through with_square().
    """
    turn: Side = Side.RED
    board: list[Piece | None] = field(default_factory=_empty_board)

    @classmethod
    def new(cls) -> GameState:
        """All squares empty, red to move."""
        return cls()

    def piece_at(self, index: int) -> Piece | None:
        """Get the piece on a square."""
        return self.board[index]

    def pieces_of(self, side: Side) -> Iterator[tuple[int, Piece]]:
        """Yield (index, piece) for every piece owned by side."""
        for index, piece in enumerate(self.board):
            if isinstance(piece, Piece) and piece.side is side:
                yield index, piece

    def occupied(self) -> Iterator[tuple[int, Piece]]:
        """Yield (index, piece) for every occupied square."""
        for index, piece in enumerate(self.board):
            if piece is not None:
                yield index, piece

    def with_square(self, index: int, piece: Piece | None) -> GameState:
        """Return new state with one square replaced."""
        if not 0 <= index < len(self.board):
            raise IndexError(f"Square index out of range: {index}")
        new_board = list(self.board)
        new_board[index] = piece
        return GameState(turn=self.turn, board=new_board)

    def with_turn(self, turn: Side) -> GameState:
        """Return new state with a different side to move."""
        return GameState(turn=turn, board=list(self.board))

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Structural form: turn plus a 65-entry board of pieces or None."""
        return {
            "turn": self.turn.value,
            "board": [
                None if piece is None
                else {"kind": piece.kind.value, "side": piece.side.value}
                for piece in self.board
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """
        Build a state from its structural form.

        Raises StateDecodeError for unknown enum values or wrong shapes.
        Board length is not checked here; that is the validator's job.
        """
        if not isinstance(data, dict):
            raise StateDecodeError("Game state must be a mapping")
        turn = _decode_enum(Side, data.get("turn"), "turn")
        raw_board = data.get("board")
        if not isinstance(raw_board, list):
            raise StateDecodeError("board must be a list")

        board: list[Piece | None] = []
        for index, entry in enumerate(raw_board):
            if entry is None:
                board.append(None)
                continue
            if not isinstance(entry, dict):
                raise StateDecodeError(f"board[{index}] must be null or a piece")
            board.append(Piece(
                kind=_decode_enum(PieceKind, entry.get("kind"), f"board[{index}].kind"),
                side=_decode_enum(Side, entry.get("side"), f"board[{index}].side"),
            ))
        return cls(turn=turn, board=board)


def _decode_enum(enum_cls, value: Any, where: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise StateDecodeError(f"{where}: unknown value {value!r}") from None
