"""
Deterministic PRNG - Seeded xorshift64* stream.

Generation must be reproducible from a seed forever, on every platform
and Python version, so the stream is computed here with fixed-width
integer arithmetic instead of relying on the random module.
"""

from __future__ import annotations
from typing import Sequence, TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF
MAX_SEED = MASK_64

# Zero is a fixed point of xorshift; it is mapped to this state instead.
ZERO_SEED_STATE = 0x9E3779B97F4A7C15

_OUTPUT_MULTIPLIER = 0x9E3779B1


class PseudoRng:
    """
    xorshift64* generator with 32-bit output.

    Usage:
        rng = PseudoRng(42)
        index = rng.gen_range(0, len(candidates))
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError(f"Seed must be an integer, got {type(seed).__name__}")
        if not 0 <= seed <= MAX_SEED:
            raise ValueError(f"Seed must be in [0, 2**64), got {seed}")
        self._state = seed or ZERO_SEED_STATE

    @property
    def state(self) -> int:
        return self._state

    def next_u32(self) -> int:
        """Advance the stream and return the next 32-bit value."""
        x = self._state
        x ^= (x << 13) & MASK_64
        x ^= x >> 7
        x ^= (x << 17) & MASK_64
        self._state = x
        return ((x & MASK_32) * _OUTPUT_MULTIPLIER) & MASK_32

    def gen_range(self, lo: int, hi: int) -> int:
        """Draw an integer in [lo, hi); returns lo for an empty range."""
        span = hi - lo
        if span <= 0:
            return lo
        return self.next_u32() % span + lo

    def choice(self, seq: Sequence[T]) -> T:
        """Draw one element uniformly."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.gen_range(0, len(seq))]
