from __future__ import annotations

import os
from collections.abc import Callable, Sequence

import pytest

from models.dice import DiceSet
from models.session import GameSession


class ScriptedRng:
    """Random source that hands out the given faces in order, cycling forever."""

    def __init__(self, faces: Sequence[int]) -> None:
        self._faces = list(faces)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        face = self._faces[self.calls % len(self._faces)]
        self.calls += 1
        assert a <= face <= b
        return face


@pytest.fixture(autouse=True)
def _clear_yatzy_env(monkeypatch) -> None:
    """Run every test without YATZY_* variables, whether from the shell or backend/.env."""
    for name in [n for n in os.environ if n.startswith("YATZY_")]:
        monkeypatch.delenv(name)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRng]:
    def _make(*faces: int) -> ScriptedRng:
        return ScriptedRng(faces)

    return _make


@pytest.fixture
def make_game(scripted_rng) -> Callable[..., GameSession]:
    """GameSession whose dice come from a fixed face sequence."""

    def _make(*faces: int, game_id: str = "g1") -> GameSession:
        return GameSession(id=game_id, dice=DiceSet(rng=scripted_rng(*faces)))

    return _make
