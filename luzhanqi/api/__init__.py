"""
API Module - Host application interface.

Exposes starting-position generation and validation through pydantic
models, so a host (UI editor, bridge layer) can exchange positions as
plain structural data.
"""

from .schemas import (
    # Requests
    GenerateStartRequest,
    ValidateStartRequest,
    # Responses
    GameStateResponse,
    ValidationResponse,
    BoardResponse,
    ErrorResponse,
    # Shared
    PieceModel,
    GameStateModel,
    SquareInfo,
    RegionInfo,
    PieceKindInfo,
    ErrorCode,
)
from .service import APIService

__all__ = [
    # Requests
    "GenerateStartRequest",
    "ValidateStartRequest",
    # Responses
    "GameStateResponse",
    "ValidationResponse",
    "BoardResponse",
    "ErrorResponse",
    # Shared
    "PieceModel",
    "GameStateModel",
    "SquareInfo",
    "RegionInfo",
    "PieceKindInfo",
    "ErrorCode",
    # Service
    "APIService",
]
