from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TurnPhase(str, Enum):
    AWAITING_FIRST_ROLL = "awaiting_first_roll"
    MID_TURN = "mid_turn"
    AWAITING_SCORE = "awaiting_score"
    FINISHED = "finished"


class GameSnapshot(BaseModel):
    """Externally visible state of one game, as returned by every API call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    dice: list[int]
    held: list[bool]
    rolls_left: int = Field(alias="rollsLeft")
    scores: dict[str, int | None]
    total: int
    finished: bool
    round: int
    phase: TurnPhase
