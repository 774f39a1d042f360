"""
Start Validation - Legality checks for starting positions.

Validates, in order:
1. Board size is exactly 65 squares
2. Every side has exactly its quota of every piece kind
3. Every piece sits on a legal starting square:
   - terrain is empty, railroad or HQ
   - the square is on the piece's own playable half
   - bombs are not on the first row
   - landmines are on the back two rows
   - flags are on an HQ

The checks never raise on malformed input; a malformed state is simply
illegal.
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
import logging

from ..board.pieces import Piece, PieceKind, Side
from ..board.terrain import NUM_SQUARES, STARTING_TERRAIN, TERRAIN, square_name
from ..board.topology import REGIONS
from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class StartValidationError(Exception):
    """Raised by assert_legal_start when a position is illegal."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Illegal starting position with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with the reasons a position is illegal."""
    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_start(state: GameState) -> ValidationResult:
    """
    Check a candidate starting position against every placement rule.

    Returns ValidationResult; errors are accumulated across all checks
    except a bad board, after which nothing else can be checked.
    """
    errors: list[str] = []

    board = getattr(state, "board", None)
    if not isinstance(board, Sequence) or isinstance(board, (str, bytes)):
        errors.append("board must be a sequence of squares")
        return _finish(errors)
    if len(board) != NUM_SQUARES:
        errors.append(f"board has {len(board)} squares, expected {NUM_SQUARES}")
        return _finish(errors)

    if not isinstance(getattr(state, "turn", None), Side):
        errors.append(f"turn must be a side, got {getattr(state, 'turn', None)!r}")

    pieces: list[tuple[int, Piece]] = []
    for index, entry in enumerate(board):
        if entry is None:
            continue
        if not _is_well_formed(entry):
            errors.append(f"{square_name(index)}: not a piece: {entry!r}")
            continue
        pieces.append((index, entry))

    errors.extend(_check_counts(pieces))
    for index, piece in pieces:
        errors.extend(_check_placement(index, piece))

    return _finish(errors)


def is_legal_start(state: GameState) -> bool:
    """Whether the state is a legal starting position."""
    return validate_start(state).valid


def assert_legal_start(state: GameState) -> None:
    """Raise StartValidationError if the state is not a legal start."""
    result = validate_start(state)
    if not result.valid:
        raise StartValidationError(result.errors)


def _finish(errors: list[str]) -> ValidationResult:
    if errors:
        logger.debug("Rejected starting position: %s", "; ".join(errors))
    return ValidationResult(valid=not errors, errors=errors)


def _is_well_formed(entry: object) -> bool:
    return (
        isinstance(entry, Piece)
        and isinstance(entry.kind, PieceKind)
        and isinstance(entry.side, Side)
    )


def _check_counts(pieces: list[tuple[int, Piece]]) -> list[str]:
    """Every (side, kind) must match its quota exactly."""
    errors = []
    counts = Counter((piece.side, piece.kind) for _, piece in pieces)
    for side in Side:
        for kind in PieceKind:
            found = counts[(side, kind)]
            if found != kind.quota:
                errors.append(
                    f"{side.value} has {found} {kind.value}(s), expected {kind.quota}"
                )
    return errors


def _check_placement(index: int, piece: Piece) -> list[str]:
    """Validate the square of a single piece."""
    errors = []
    name = square_name(index)
    terrain = TERRAIN[index]
    region = REGIONS[piece.side]

    if terrain not in STARTING_TERRAIN:
        errors.append(f"{name}: {piece} cannot start on {terrain.value}")
    elif index not in region.playable:
        errors.append(f"{name}: {piece} is outside its own half")

    if piece.kind == PieceKind.BOMB and index in region.first_row:
        errors.append(f"{name}: {piece} cannot start on the first row")
    elif piece.kind == PieceKind.LANDMINE and index not in region.back_rows:
        errors.append(f"{name}: {piece} must start on the back two rows")
    elif piece.kind == PieceKind.FLAG and index not in region.hq:
        errors.append(f"{name}: {piece} must start on a headquarters")

    return errors
