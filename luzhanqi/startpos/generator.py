"""
Start Generator - Builds a legal starting position from a seed.

Each side is placed independently, red first, from one shared PRNG
stream. The placement order matters because every step narrows the
squares left for the next:
1. Flag on one of the two HQ squares
2. Landmines on the remaining back-row squares
3. Bombs anywhere left except the first row
4. Every other piece shuffled over whatever squares remain

Candidates are drawn directly (never by rejection), so the number of
PRNG draws depends only on the quotas and the board.
"""

from __future__ import annotations
import logging

from ..board.pieces import Piece, PieceKind, Side, RESTRICTED_KINDS
from ..board.terrain import NUM_SQUARES, square_name
from ..board.topology import REGIONS, SideRegion
from ..engine_core.rng import PseudoRng
from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class PlacementInvariantError(RuntimeError):
    """
    No candidate square was left for a required placement.

    Only possible if the terrain or quota tables are inconsistent, so it
    signals a programming error rather than bad input.
    """


def random_start(seed: int) -> GameState:
    """
    Generate a legal starting position.

    Args:
        seed: Unsigned 64-bit seed; the same seed always yields the same
            position

    Returns:
        GameState with red to move and all 50 pieces placed
    """
    rng = PseudoRng(seed)
    board: list[Piece | None] = [None] * NUM_SQUARES

    for side in (Side.RED, Side.BLACK):
        for index, piece in _place_side(REGIONS[side], rng):
            board[index] = piece

    logger.debug("Generated starting position for seed %d", seed)
    return GameState(turn=Side.RED, board=board)


generate_start = random_start


def _place_side(region: SideRegion, rng: PseudoRng) -> list[tuple[int, Piece]]:
    """Place all of one side's pieces; returns (square, piece) pairs."""
    side = region.side
    pool = sorted(region.playable)
    placements: list[tuple[int, Piece]] = []

    def place(kind: PieceKind, candidates: list[int]) -> None:
        if not candidates:
            raise PlacementInvariantError(
                f"No square left for {side.value} {kind.value}"
            )
        square = candidates[rng.gen_range(0, len(candidates))]
        pool.remove(square)
        placements.append((square, Piece(kind, side)))

    place(PieceKind.FLAG, [sq for sq in pool if sq in region.hq])

    for _ in range(PieceKind.LANDMINE.quota):
        place(PieceKind.LANDMINE, [sq for sq in pool if sq in region.back_rows])

    for _ in range(PieceKind.BOMB.quota):
        place(PieceKind.BOMB, [sq for sq in pool if sq not in region.first_row])

    remaining = [
        kind
        for kind in PieceKind
        if kind not in RESTRICTED_KINDS
        for _ in range(kind.quota)
    ]
    while remaining:
        if not pool:
            raise PlacementInvariantError(
                f"{len(remaining)} {side.value} piece(s) left with no squares"
            )
        square = pool.pop(rng.gen_range(0, len(pool)))
        kind = remaining.pop(rng.gen_range(0, len(remaining)))
        placements.append((square, Piece(kind, side)))

    if pool:
        raise PlacementInvariantError(
            f"{len(pool)} {side.value} square(s) left empty after placement"
        )

    if logger.isEnabledFor(logging.DEBUG):
        restricted = {
            kind.value: ", ".join(square_name(sq) for sq, p in placements if p.kind == kind)
            for kind in (PieceKind.FLAG, PieceKind.LANDMINE, PieceKind.BOMB)
        }
        logger.debug("Placed %s: %s", side.value, restricted)
    return placements
