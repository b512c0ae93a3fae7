"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, StrictInt, field_validator

from src.core import config
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player, Status

Grid = list[list[str]]


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    game_id: UUID
    row: StrictInt
    col: StrictInt

    @field_validator(*["row", "col"])
    @classmethod
    def validate_position(cls, value: int) -> int:
        if not 0 <= value <= 2:
            raise InvalidRequestError(
                f"Invalid move: {value} is not a row/column index between 0 and 2."
            )
        return value


class MoveBody(BaseModel):
    """JSON body of a move request: the game ID travels in the path."""

    # Strict: "1", 1.0 and true are not row/column indices
    row: StrictInt
    col: StrictInt


class AutomatedMoveRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class GameHistoryRequest(BaseModel):
    limit: int = config.HISTORY_DEFAULT_LIMIT
    status: Optional[Status] = None

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Optional[int]) -> int:
        if value is None:
            return config.HISTORY_DEFAULT_LIMIT
        if not 1 <= value <= config.HISTORY_MAX_LIMIT:
            raise InvalidRequestError(
                f"Limit must be between 1 and {config.HISTORY_MAX_LIMIT}"
            )
        return value

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in Status.__members__.values():
            raise InvalidRequestError(
                f"Invalid status value: {value!r}. Pick one from {','.join(Status)}"
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: Grid
    current_player: Player
    status: Status
    created_at: datetime
    updated_at: datetime
