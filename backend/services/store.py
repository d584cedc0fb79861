"""In-memory game store, keyed by game ID. Nothing survives a restart."""

from __future__ import annotations

import itertools
import logging
import random
import threading

from models.dice import DiceSet, RandomSource
from models.errors import GameNotFound
from models.session import GameSession

logger = logging.getLogger(__name__)


class GameStore:
    """
    Registry of live GameSession objects.

    IDs come from a counter ("1", "2", ...) and are never reused within one
    store, even after a game is deleted. Every new game's dice share the
    store's random source.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()
        self._games: dict[str, GameSession] = {}
        self._ids = itertools.count(1)

    def create_game(self) -> GameSession:
        with self._lock:
            game_id = str(next(self._ids))
            game = GameSession(id=game_id, dice=DiceSet(rng=self._rng))
            self._games[game_id] = game
        logger.info("[store] Game created: game_id=%s (live games: %d)", game_id, len(self))
        return game

    def get_game(self, game_id: str) -> GameSession:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFound()
        return game

    def delete_game(self, game_id: str) -> bool:
        """Remove a game. Unknown IDs are ignored; returns whether anything was removed."""
        with self._lock:
            removed = self._games.pop(game_id, None) is not None
        if removed:
            logger.info("[store] Game deleted: game_id=%s", game_id)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._games.clear()

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
