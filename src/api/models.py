"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError, InvalidSquareError
from src.core.shared_types import Color, PieceType, Status
from src.cube_chess.geometry import BOARD_SIZE, Axis, RotationDirection
from src.cube_chess.square import Square

SquareId = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_turn: Color = Color.WHITE


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class PieceMoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareId
    to_square: SquareId

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        try:
            Square.from_id(value)
        except InvalidSquareError as exc:
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square id."
            ) from exc
        return value


class CubeMoveRequest(BaseModel):
    game_id: UUID
    axis: Axis
    layer: int
    direction: RotationDirection

    @field_validator("layer")
    @classmethod
    def validate_layer(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Layer must lie between 0 and {BOARD_SIZE - 1}, got {value}."
            )
        return value


class UndoRequest(BaseModel):
    game_id: UUID


class RedoRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    identity: str
    color: Color
    type: PieceType


class GameResponse(BaseModel):
    game_id: UUID
    turn: Color
    status: Status
    winner: Optional[Color]
    in_check: bool
    pieces: dict[SquareId, PieceResponse]
    move_history: list[str]
    can_undo: bool
    can_redo: bool


class LegalMovesResponse(BaseModel):
    game_id: UUID
    turn: Color
    legal_moves: list[str]
