from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, conint, constr

from bowling_app.constants import FINAL_FRAME_INDEX


class ErrorCode(str, Enum):
    invalid_pin_count = "InvalidPinCount"
    invalid_roll_sequence = "InvalidRollSequenceForFrame"
    game_already_complete = "GameAlreadyComplete"
    game_not_found = "GameNotFound"


class ErrorBody(BaseModel):
    code: ErrorCode
    message: str
    details: dict | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


class Frame(BaseModel):
    frame_index: conint(ge=0, le=FINAL_FRAME_INDEX)
    roll1: int
    roll2: int | None = None
    roll3: int | None = None
    score: int | None = None
    running_total: int | None = None

    @property
    def rolls(self) -> list[int]:
        return [r for r in (self.roll1, self.roll2, self.roll3) if r is not None]


class Game(BaseModel):
    id: UUID
    name: str
    frames: list[Frame] = Field(default_factory=list)
    total_score: int = 0
    current_frame_index: int = 0
    is_complete: bool = False
    created_at: datetime


class HighScore(BaseModel):
    name: str
    score: int
    achieved_at: datetime
    game_id: UUID | None = None


class RollInput(BaseModel):
    """Pin counts for one frame. Range and sequence checks live in validators."""

    game_id: UUID
    roll1: int
    roll2: int | None = None
    roll3: int | None = None


class TurnRolls(BaseModel):
    roll1: int
    roll2: int | None = None
    roll3: int | None = None


class TurnResult(BaseModel):
    success: bool
    error: ErrorBody | None = None
    game: Game


class StartGameRequest(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=100)


class TurnResponse(BaseModel):
    status: Literal["ok"]
    game: Game


class HighScoresResponse(BaseModel):
    limit: int
    high_scores: list[HighScore] = Field(default_factory=list)
