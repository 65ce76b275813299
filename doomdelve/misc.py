"""Small game helpers: dice, strength limits, wording and level thresholds."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Optional

AMULETLEVEL = 26
MIN_STRENGTH = 3
MAX_STRENGTH = 31

POTION = "!"
SCROLL = "?"
RING = "="
STICK = "/"
FOOD = ":"
WEAPON = ")"
ARMOR = "]"
STAIRS = "%"
GOLD = "*"
AMULET = ","

# The amulet comes last so that it can be left out above its level.
_THING_LIST = (POTION, SCROLL, RING, STICK, FOOD, WEAPON, ARMOR, STAIRS, GOLD, AMULET)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Dice:
    """The game's source of random numbers."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def rnd(self, range_: int) -> int:
        """A number in [0, |range_|), or 0 when range_ is 0."""
        if range_ == 0:
            return 0
        return self._rng.randrange(abs(range_))

    def roll(self, number: int, sides: int) -> int:
        """The total of ``number`` dice with ``sides`` sides each."""
        return sum(self.rnd(sides) + 1 for _ in range(number))


def sign(nm: int) -> int:
    """-1, 0 or 1 following the sign of the number."""
    if nm < 0:
        return -1
    return 1 if nm > 0 else 0


def spread(nm: int, dice: Dice) -> int:
    """A value within about twenty percent either side of ``nm``."""
    return nm - _trunc_div(nm, 20) + dice.rnd(_trunc_div(nm, 10))


def vowelstr(word: str) -> str:
    """'n' when the word starts with a vowel (to make 'a' into 'an')."""
    if word and word[0] in "aeiouAEIOU":
        return "n"
    return ""


def add_str(strength: int, amount: int) -> int:
    """Strength after adding ``amount``, kept within its limits."""
    return max(MIN_STRENGTH, min(MAX_STRENGTH, strength + amount))


def choose_str(hallucinating: bool, trip: str, straight: str) -> str:
    """The first string for a hallucinating player, the second otherwise."""
    return trip if hallucinating else straight


def rnd_thing(depth: int, dice: Dice) -> str:
    """A random object symbol fit for this depth."""
    count = len(_THING_LIST) if depth >= AMULETLEVEL else len(_THING_LIST) - 1
    return _THING_LIST[dice.rnd(count)]


def level_for_experience(experience: int, thresholds: Iterable[int]) -> int:
    """The experience level reached with the given points.

    ``thresholds`` lists the points needed for each next level in rising
    order; a zero ends the list early.
    """
    passed = 0
    for needed in thresholds:
        if needed == 0 or needed > experience:
            break
        passed += 1
    return passed + 1