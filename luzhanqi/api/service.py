"""
API Service - Thin layer between host applications and the engine.

The service:
1. Translates structural requests to engine calls
2. Generates starting positions from seeds
3. Validates submitted positions, including malformed ones
4. Describes the static board for rendering

This layer is framework-agnostic; hosts serialize the pydantic models
however they like.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import logging

from pydantic import ValidationError

from .schemas import (
    BoardResponse,
    ErrorCode,
    ErrorResponse,
    GameStateModel,
    GameStateResponse,
    GenerateStartRequest,
    PieceKindInfo,
    RegionInfo,
    SquareInfo,
    ValidateStartRequest,
    ValidationResponse,
)
from ..board.pieces import PieceKind, Side
from ..board.terrain import NUM_COLS, NUM_ROWS, NUM_SQUARES, TERRAIN, square_name
from ..board.topology import REGIONS, index_to_rc, owner_of
from ..startpos import generate_start, validate_start

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Engine facade for hosts.

    Usage:
        service = APIService()

        # Generate
        response = service.generate_start(GenerateStartRequest(seed=7))

        # Validate an editor payload
        verdict = service.validate_payload(request_json)
    """

    def generate_start(self, request: GenerateStartRequest) -> GameStateResponse:
        """Generate the starting position for a seed."""
        state = generate_start(request.seed)
        return GameStateResponse(
            seed=request.seed,
            legal=validate_start(state).valid,
            state=GameStateModel.from_state(state),
        )

    def generate_payload(self, data: Any) -> GameStateResponse | ErrorResponse:
        """Generate from a raw request payload such as {"seed": 7}."""
        try:
            request = GenerateStartRequest.model_validate(data)
        except ValidationError as exc:
            return ErrorResponse(
                error="Seed must be an integer in [0, 2**64)",
                error_code=ErrorCode.INVALID_SEED,
                details={"errors": [_format_error(err) for err in exc.errors()]},
            )
        return self.generate_start(request)

    def validate_start(self, request: ValidateStartRequest) -> ValidationResponse:
        """Validate an already-parsed position."""
        result = validate_start(request.state.to_state())
        return ValidationResponse(
            legal=result.valid,
            errors=result.errors,
            error_code=None if result.valid else ErrorCode.ILLEGAL_START,
        )

    def validate_payload(self, data: Any) -> ValidationResponse:
        """
        Validate a raw structural payload.

        Malformed payloads are illegal positions, never exceptions.
        """
        try:
            state = GameStateModel.model_validate(data)
        except ValidationError as exc:
            logger.debug("Malformed position payload: %s", exc)
            return ValidationResponse(
                legal=False,
                errors=[_format_error(err) for err in exc.errors()],
                error_code=ErrorCode.INVALID_STATE,
            )
        return self.validate_start(ValidateStartRequest(state=state))

    def board(self) -> BoardResponse:
        """Describe terrain, square names and side regions."""
        squares = []
        for index in range(NUM_SQUARES):
            row, col = index_to_rc(index)
            squares.append(SquareInfo(
                index=index,
                name=square_name(index),
                row=row,
                col=col,
                terrain=TERRAIN[index].value,
                owner=owner_of(index),
            ))

        regions = [
            RegionInfo(
                side=side,
                hq=sorted(REGIONS[side].hq),
                first_row=sorted(REGIONS[side].first_row),
                back_rows=sorted(REGIONS[side].back_rows),
                playable=sorted(REGIONS[side].playable),
            )
            for side in Side
        ]
        return BoardResponse(rows=NUM_ROWS, cols=NUM_COLS, squares=squares, regions=regions)

    def piece_kinds(self) -> list[PieceKindInfo]:
        """Rank and quota of every piece kind, in taxonomy order."""
        return [
            PieceKindInfo(kind=kind, code=kind.code, rank=kind.rank, quota=kind.quota)
            for kind in PieceKind
        ]


def _format_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
