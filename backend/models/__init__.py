from .category import Category
from .dice import DICE_COUNT, NEUTRAL_FACES, DiceSet
from .errors import (
    CategoryAlreadyScored,
    GameFinished,
    GameNotFound,
    IllegalBeforeRoll,
    InvalidCategory,
    InvalidIndex,
    NoRollsLeft,
    NotFoundError,
    StateError,
    ValidationError,
    YatzyError,
)
from .session import GameSession
from .snapshot import GameSnapshot, TurnPhase

__all__ = [
    "Category",
    "DiceSet",
    "DICE_COUNT",
    "NEUTRAL_FACES",
    "GameSession",
    "GameSnapshot",
    "TurnPhase",
    "YatzyError",
    "ValidationError",
    "StateError",
    "NotFoundError",
    "InvalidIndex",
    "InvalidCategory",
    "NoRollsLeft",
    "GameFinished",
    "IllegalBeforeRoll",
    "CategoryAlreadyScored",
    "GameNotFound",
]
