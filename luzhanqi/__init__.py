"""
Luzhanqi - Starting-position engine for the land battle chess game.

A deterministic, rules-driven model of the 13x5 Luzhanqi board that provides:
- Board topology and terrain
- Piece taxonomy (ranks and quotas)
- Legality validation of starting positions
- Seeded generation of legal starting positions
"""

from .startpos import generate_start, is_legal_start

__version__ = "0.1.0"

__all__ = ["generate_start", "is_legal_start", "__version__"]
