"""
Engine Core - Game state container and deterministic randomness.

The core holds:
1. GameState, the position before play begins
2. PseudoRng, the seeded stream behind reproducible generation
"""

from .state import GameState, StateDecodeError
from .rng import PseudoRng, MAX_SEED

__all__ = [
    "GameState",
    "StateDecodeError",
    "PseudoRng",
    "MAX_SEED",
]
