from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from services import scoring

from .category import Category
from .dice import DiceSet, check_index
from .errors import CategoryAlreadyScored, GameFinished, IllegalBeforeRoll, NoRollsLeft
from .snapshot import GameSnapshot, TurnPhase

ROLLS_PER_TURN = 3


def empty_score_sheet() -> dict[Category, int | None]:
    return {category: None for category in Category}


@dataclass
class GameSession:
    """One game of Yatzy: the dice, the score sheet and the turn state machine.

    The phase is derived from ``rolls_left`` and ``finished``:
      - awaiting_first_roll: rolls_left == 3, nothing rolled this turn
      - mid_turn:            0 < rolls_left < 3
      - awaiting_score:      rolls_left == 0, a category must be chosen
      - finished:            every category is scored

    Each public method validates everything first and only then mutates, so
    a raised error leaves the session exactly as it was. All of them hold
    ``lock`` for their whole duration.
    """

    id: str
    dice: DiceSet = field(default_factory=DiceSet)
    scores: dict[Category, int | None] = field(default_factory=empty_score_sheet)
    rolls_left: int = ROLLS_PER_TURN
    round: int = 1
    total: int = 0
    finished: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def phase(self) -> TurnPhase:
        if self.finished:
            return TurnPhase.FINISHED
        if self.rolls_left == ROLLS_PER_TURN:
            return TurnPhase.AWAITING_FIRST_ROLL
        if self.rolls_left == 0:
            return TurnPhase.AWAITING_SCORE
        return TurnPhase.MID_TURN

    @property
    def open_categories(self) -> list[Category]:
        return [category for category, points in self.scores.items() if points is None]

    def is_complete(self) -> bool:
        return all(points is not None for points in self.scores.values())

    def roll(self) -> list[int]:
        with self.lock:
            if self.finished:
                raise GameFinished()
            if self.rolls_left <= 0:
                raise NoRollsLeft()
            values = self.dice.roll()
            self.rolls_left -= 1
            return values

    def toggle_hold(self, index: int) -> bool:
        with self.lock:
            check_index(index)
            self._require_rolled()
            return self.dice.toggle_hold(index)

    def score_category(self, category: Category | str) -> int:
        with self.lock:
            category = scoring.parse_category(category)
            self._require_rolled()
            if self.scores[category] is not None:
                raise CategoryAlreadyScored()

            points = scoring.score(category, self.dice.values)
            self.scores[category] = points
            self.total = sum(p for p in self.scores.values() if p is not None)
            self.dice.reset_for_next_turn()
            if self.is_complete():
                self.finished = True
                self.rolls_left = 0
            else:
                self.rolls_left = ROLLS_PER_TURN
                self.round += 1
            return points

    def end_turn(self) -> None:
        """Give up the remaining rolls of this turn; a category must be scored next."""
        with self.lock:
            self._require_rolled()
            self.rolls_left = 0

    def snapshot(self) -> GameSnapshot:
        with self.lock:
            return GameSnapshot(
                id=self.id,
                dice=list(self.dice.values),
                held=list(self.dice.held),
                rolls_left=self.rolls_left,
                scores={category.value: points for category, points in self.scores.items()},
                total=self.total,
                finished=self.finished,
                round=self.round,
                phase=self.phase,
            )

    def _require_rolled(self) -> None:
        if self.finished:
            raise GameFinished()
        if self.rolls_left == ROLLS_PER_TURN:
            raise IllegalBeforeRoll()
