from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .errors import InvalidIndex

DICE_COUNT = 5
MIN_FACE = 1
MAX_FACE = 6
# Shown between turns so a reset is visible; not a rolled result.
NEUTRAL_FACES = (1, 2, 3, 4, 5)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def is_valid_face(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_FACE <= value <= MAX_FACE


def check_faces(faces: Sequence[int]) -> list[int]:
    values = list(faces)
    if len(values) != DICE_COUNT or not all(is_valid_face(v) for v in values):
        raise ValueError(f"expected {DICE_COUNT} faces in [{MIN_FACE}, {MAX_FACE}], got {values!r}")
    return values


@dataclass
class DiceSet:
    values: list[int] = field(default_factory=lambda: list(NEUTRAL_FACES))
    held: list[bool] = field(default_factory=lambda: [False] * DICE_COUNT)
    rng: RandomSource = field(default_factory=random.Random, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.values = check_faces(self.values)
        if len(self.held) != DICE_COUNT:
            raise ValueError(f"expected {DICE_COUNT} hold flags, got {len(self.held)}")
        self.held = [bool(h) for h in self.held]

    def roll(self) -> list[int]:
        """Re-roll every die that is not held and return the new faces."""
        for i in range(DICE_COUNT):
            if not self.held[i]:
                self.values[i] = self.rng.randint(MIN_FACE, MAX_FACE)
        return list(self.values)

    def toggle_hold(self, index: int) -> bool:
        check_index(index)
        self.held[index] = not self.held[index]
        return self.held[index]

    def reset_for_next_turn(self, faces: Sequence[int] = NEUTRAL_FACES) -> None:
        self.values = check_faces(faces)
        self.held = [False] * DICE_COUNT


def check_index(index: object) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < DICE_COUNT:
        raise InvalidIndex()
    return index
