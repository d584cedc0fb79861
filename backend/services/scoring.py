"""Yatzy scoring rules.

Every rule is a pure function of the five faces. ``score`` looks the rule up
in ``RULES`` by category; there is no fallback for unknown categories.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence

from models.category import UPPER_SECTION, Category
from models.dice import check_faces
from models.errors import InvalidCategory

FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YATZY_POINTS = 50

SMALL_STRAIGHTS = ((1, 2, 3, 4), (2, 3, 4, 5), (3, 4, 5, 6))
LARGE_STRAIGHTS = ((1, 2, 3, 4, 5), (2, 3, 4, 5, 6))

Rule = Callable[[Sequence[int]], int]


def _upper(face: int) -> Rule:
    def rule(values: Sequence[int]) -> int:
        return values.count(face) * face

    return rule


def _of_a_kind(n: int) -> Rule:
    def rule(values: Sequence[int]) -> int:
        return sum(values) if max(Counter(values).values()) >= n else 0

    return rule


def _contains_run(distinct: tuple[int, ...], run: tuple[int, ...]) -> bool:
    width = len(run)
    return any(distinct[i : i + width] == run for i in range(len(distinct) - width + 1))


def full_house(values: Sequence[int]) -> int:
    # Five of a kind has counts {5} and does not count as a full house.
    return FULL_HOUSE_POINTS if sorted(Counter(values).values()) == [2, 3] else 0


def small_straight(values: Sequence[int]) -> int:
    distinct = tuple(sorted(set(values)))
    return SMALL_STRAIGHT_POINTS if any(_contains_run(distinct, run) for run in SMALL_STRAIGHTS) else 0


def large_straight(values: Sequence[int]) -> int:
    return LARGE_STRAIGHT_POINTS if tuple(sorted(set(values))) in LARGE_STRAIGHTS else 0


def chance(values: Sequence[int]) -> int:
    return sum(values)


def yatzy(values: Sequence[int]) -> int:
    return YATZY_POINTS if len(set(values)) == 1 else 0


RULES: dict[Category, Rule] = {
    **{category: _upper(face) for category, face in UPPER_SECTION.items()},
    Category.THREE_OF_A_KIND: _of_a_kind(3),
    Category.FOUR_OF_A_KIND: _of_a_kind(4),
    Category.FULL_HOUSE: full_house,
    Category.SMALL_STRAIGHT: small_straight,
    Category.LARGE_STRAIGHT: large_straight,
    Category.CHANCE: chance,
    Category.YATZY: yatzy,
}


def parse_category(category: Category | str) -> Category:
    """Coerce a category tag to ``Category``, raising InvalidCategory for anything else."""
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        raise InvalidCategory() from None


def score(category: Category | str, values: Sequence[int]) -> int:
    """Points the five faces in ``values`` are worth in ``category``."""
    rule = RULES[parse_category(category)]
    return rule(check_faces(values))


def potential_scores(
    values: Sequence[int],
    categories: Iterable[Category | str] | None = None,
) -> dict[Category, int]:
    """Score the current dice against several categories (all of them by default)."""
    faces = check_faces(values)
    wanted = list(Category) if categories is None else [parse_category(c) for c in categories]
    return {category: RULES[category](faces) for category in wanted}
