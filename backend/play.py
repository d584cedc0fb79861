"""Play Yatzy in the terminal against the local engine (no server needed).

Commands:
  r                 roll the dice that are not held
  h <n> [<n> ...]   hold/release dice by position (1-5)
  s <category|1-13> score the current dice, e.g. "s full house" or "s 9"
  e                 end the turn early and pick a category
  n                 start a new game
  q                 quit
  ?                 show this help
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from typing import TextIO

from models.category import Category
from models.dice import check_index
from models.errors import InvalidCategory, InvalidIndex, YatzyError
from models.session import GameSession
from models.snapshot import TurnPhase
from services import game_actions, scoring
from services.store import GameStore

HELP = __doc__.split("Commands:", 1)[1].rstrip()
CATEGORIES = list(Category)


def parse_category_arg(text: str) -> Category:
    """Accept a 1-based row number or a category name in any case."""
    text = " ".join(text.split())
    if text.isdigit():
        number = int(text)
        if 1 <= number <= len(CATEGORIES):
            return CATEGORIES[number - 1]
        raise InvalidCategory()
    for category in CATEGORIES:
        if category.value.lower() == text.lower():
            return category
    raise InvalidCategory()


def parse_dice_args(args: list[str]) -> list[int]:
    if not args:
        raise InvalidIndex()
    try:
        return [int(a) - 1 for a in args]
    except ValueError:
        raise InvalidIndex() from None


def render(game: GameSession, status: str) -> str:
    snap = game.snapshot()
    lines = [
        "",
        f"Game {snap.id}  round {snap.round}/{len(CATEGORIES)}  rolls left: {snap.rolls_left}",
        "Dice: " + "  ".join(f"[{v}]" if held else f" {v} " for v, held in zip(snap.dice, snap.held)),
        "      " + "  ".join(f" {i} " for i in range(1, len(snap.dice) + 1)),
        "",
    ]
    previews: dict[Category, int] = {}
    if snap.phase in (TurnPhase.MID_TURN, TurnPhase.AWAITING_SCORE):
        previews = scoring.potential_scores(snap.dice, game.open_categories)
    for number, category in enumerate(CATEGORIES, start=1):
        points = snap.scores[category.value]
        if points is not None:
            cell = f"{points:>3}"
        elif category in previews:
            cell = f"({previews[category]})"
        else:
            cell = "  -"
        lines.append(f"{number:>2}. {category.value:<16}{cell}")
    lines.append(f"    {'Total':<16}{snap.total:>3}")
    lines.append("")
    lines.append(status)
    return "\n".join(lines)


def handle_command(store: GameStore, game: GameSession, line: str) -> tuple[GameSession, str]:
    """Apply one command line; returns the (possibly new) game and the status message."""
    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    if command == "r":
        return game, game_actions.roll_dice(game).message
    if command == "h":
        # "h 1 1" means die 1 once, not a hold and a release
        indexes = list(dict.fromkeys(check_index(i) for i in parse_dice_args(rest.split())))
        message = ""
        for index in indexes:
            message = game_actions.toggle_hold(game, index).message
        return game, message
    if command == "s":
        return game, game_actions.score_category(game, parse_category_arg(rest)).message
    if command == "e":
        return game, game_actions.end_turn(game).message
    if command == "n":
        store.delete_game(game.id)
        return store.create_game(), "New game started! Roll to begin."
    if command in ("?", "help"):
        return game, HELP
    return game, f"Unknown command {command!r}. Type ? for help."


def run(
    store: GameStore,
    *,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> GameSession:
    """Interactive loop; returns the game in play when the player quits or input ends."""
    game = store.create_game()
    status = "New game started! Roll to begin."
    while True:
        print(render(game, status), file=out)
        try:
            line = read_line("> ")
        except EOFError:
            break
        if line.strip().lower() in ("q", "quit"):
            break
        try:
            game, status = handle_command(store, game, line)
        except YatzyError as exc:
            status = exc.message
    print(f"Bye! Final total: {game.total}", file=out)
    return game


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play Yatzy in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed the dice for a reproducible game")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    run(GameStore(rng=rng))


if __name__ == "__main__":
    main()
