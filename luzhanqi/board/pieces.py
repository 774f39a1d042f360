"""
Piece Taxonomy - Piece kinds, sides and per-player quotas.

Kinds in descending rank:
    Overall > Army > Division > Brigade > Regiment > Battalion
    > Company > Platoon > Engineer

Special pieces (rank 0):
- Bomb: destroys both itself and the piece it attacks. Cannot start on
  the front row.
- Landmine: destroys the attacker except engineers and bombs. Must start
  on the last two rows. Cannot move.
- Flag: must start on an HQ. Cannot move. Capturing it wins the game.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """The two players. Red sits on the near side and moves first."""
    RED = "red"
    BLACK = "black"

    def other(self) -> Side:
        """Return the opponent."""
        return Side.BLACK if self is Side.RED else Side.RED


class PieceKind(Enum):
    """Piece kinds, in taxonomy order."""
    OVERALL = "overall"
    ARMY = "army"
    DIVISION = "division"
    BRIGADE = "brigade"
    REGIMENT = "regiment"
    BATTALION = "battalion"
    COMPANY = "company"
    PLATOON = "platoon"
    ENGINEER = "engineer"
    BOMB = "bomb"
    LANDMINE = "landmine"
    FLAG = "flag"

    @property
    def rank(self) -> int:
        """Combat strength; 0 for bomb, landmine and flag."""
        return _RANKS[self]

    @property
    def quota(self) -> int:
        """Number of pieces of this kind each side starts with."""
        return QUOTAS[self]

    @property
    def code(self) -> str:
        """Single-letter code used in board diagrams."""
        return _CODES[self]


_RANKS = {
    PieceKind.OVERALL: 9,
    PieceKind.ARMY: 8,
    PieceKind.DIVISION: 7,
    PieceKind.BRIGADE: 6,
    PieceKind.REGIMENT: 5,
    PieceKind.BATTALION: 4,
    PieceKind.COMPANY: 3,
    PieceKind.PLATOON: 2,
    PieceKind.ENGINEER: 1,
    PieceKind.BOMB: 0,
    PieceKind.LANDMINE: 0,
    PieceKind.FLAG: 0,
}

QUOTAS = {
    PieceKind.OVERALL: 1,
    PieceKind.ARMY: 1,
    PieceKind.DIVISION: 2,
    PieceKind.BRIGADE: 2,
    PieceKind.REGIMENT: 2,
    PieceKind.BATTALION: 2,
    PieceKind.COMPANY: 3,
    PieceKind.PLATOON: 3,
    PieceKind.ENGINEER: 3,
    PieceKind.BOMB: 2,
    PieceKind.LANDMINE: 3,
    PieceKind.FLAG: 1,
}

_CODES = {
    PieceKind.OVERALL: "O",
    PieceKind.ARMY: "A",
    PieceKind.DIVISION: "D",
    PieceKind.BRIGADE: "B",
    PieceKind.REGIMENT: "R",
    PieceKind.BATTALION: "T",
    PieceKind.COMPANY: "C",
    PieceKind.PLATOON: "P",
    PieceKind.ENGINEER: "E",
    PieceKind.BOMB: "X",
    PieceKind.LANDMINE: "L",
    PieceKind.FLAG: "F",
}

PIECES_PER_SIDE = sum(QUOTAS.values())

# Kinds with a placement rule of their own; everything else only needs
# to start on its own playable half.
RESTRICTED_KINDS = frozenset({PieceKind.FLAG, PieceKind.LANDMINE, PieceKind.BOMB})


@dataclass(frozen=True)
class Piece:
    """A piece on the board: what it is and who owns it."""
    kind: PieceKind
    side: Side

    @property
    def code(self) -> str:
        """Diagram code: upper case for red, lower case for black."""
        code = self.kind.code
        return code if self.side is Side.RED else code.lower()

    def __str__(self) -> str:
        return f"{self.side.value} {self.kind.value}"
