"""Player actions shared by the HTTP routes and the terminal front end.

Each action holds the game's lock across the operation and the snapshot that
follows it, so concurrent requests on one game are serialized and always see
a consistent state. Rejected actions are logged and re-raised unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from models.category import Category
from models.errors import YatzyError
from models.session import GameSession
from models.snapshot import GameSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ActionResult:
    message: str
    game: GameSnapshot


def _guarded(game: GameSession, action: str, operation: Callable[[], T]) -> T:
    try:
        return operation()
    except YatzyError as exc:
        logger.warning(
            "[game_actions] %s rejected: game_id=%s phase=%s error=%s",
            action,
            game.id,
            game.phase.value,
            type(exc).__name__,
        )
        raise


def roll_dice(game: GameSession) -> ActionResult:
    with game.lock:
        values = _guarded(game, "roll", game.roll)
        if game.rolls_left > 0:
            message = f"Rolled dice. Rolls left: {game.rolls_left}."
        else:
            message = "Rolled dice. No rolls left, please choose a category."
        logger.info("[game_actions] Rolled: game_id=%s dice=%s rolls_left=%d", game.id, values, game.rolls_left)
        return ActionResult(message, game.snapshot())


def toggle_hold(game: GameSession, index: int) -> ActionResult:
    with game.lock:
        held = _guarded(game, "hold", lambda: game.toggle_hold(index))
        message = f"Die {index + 1} {'held' if held else 'released'}."
        logger.info("[game_actions] Hold toggled: game_id=%s index=%d held=%s", game.id, index, held)
        return ActionResult(message, game.snapshot())


def score_category(game: GameSession, category: Category | str) -> ActionResult:
    with game.lock:
        points = _guarded(game, "score", lambda: game.score_category(category))
        name = Category(category).value
        if game.finished:
            message = f"Game over! Final score: {game.total}"
            logger.info("[game_actions] Game finished: game_id=%s total=%d", game.id, game.total)
        else:
            message = f"Scored {points} points in {name}. New turn started."
        logger.info(
            "[game_actions] Scored: game_id=%s category=%s points=%d total=%d",
            game.id,
            name,
            points,
            game.total,
        )
        return ActionResult(message, game.snapshot())


def end_turn(game: GameSession) -> ActionResult:
    with game.lock:
        _guarded(game, "end_turn", game.end_turn)
        logger.info("[game_actions] Turn ended early: game_id=%s round=%d", game.id, game.round)
        return ActionResult("Turn ended. Choose a category to score.", game.snapshot())
