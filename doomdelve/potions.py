"""Potion kinds, their standard timed effects and what radiates magic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .misc import AMULET, ARMOR, POTION, RING, SCROLL, STICK, WEAPON

HUHDURATION = 20
SEEDURATION = 850
HEALTIME = 30


class Potion(IntEnum):
    CONFUSE = 0
    LSD = 1
    POISON = 2
    STRENGTH = 3
    SEEINVIS = 4
    HEALING = 5
    MFIND = 6
    TFIND = 7
    RAISE = 8
    XHEAL = 9
    HASTE = 10
    RESTORE = 11
    BLIND = 12
    LEVIT = 13


@dataclass(frozen=True)
class PotionAction:
    """A potion that sets a condition on the player for a while.

    ``daemon`` names the routine that ends the condition; the messages
    are shown to a hallucinating (``high``) or sober (``straight``)
    player.  ``{fruit}`` in a message stands for the player's favourite
    fruit.
    """

    condition: str
    daemon: str
    duration: int
    high: str
    straight: str


_ACTIONS = {
    Potion.CONFUSE: PotionAction(
        "confused",
        "unconfuse",
        HUHDURATION,
        "what a tripy feeling!",
        "wait, what's going on here. Huh? What? Who?",
    ),
    Potion.LSD: PotionAction(
        "hallucinating",
        "come_down",
        SEEDURATION,
        "Oh, wow!  Everything seems so cosmic!",
        "Oh, wow!  Everything seems so cosmic!",
    ),
    Potion.SEEINVIS: PotionAction(
        "see_invisible",
        "unsee",
        SEEDURATION,
        "this potion tastes like {fruit} juice",
        "this potion tastes like {fruit} juice",
    ),
    Potion.BLIND: PotionAction(
        "blind",
        "sight",
        SEEDURATION,
        "oh, bummer!  Everything is dark!  Help!",
        "a cloak of darkness falls around you",
    ),
    Potion.LEVIT: PotionAction(
        "levitating",
        "land",
        HEALTIME,
        "oh, wow!  You're floating in the air!",
        "you start to float in the air",
    ),
}


def potion_action(potion: Potion) -> Optional[PotionAction]:
    """The standard timed effect of a potion, or None if it has none."""
    return _ACTIONS.get(Potion(potion))


def is_magic(
    item_type: str,
    protected: bool = False,
    armor: int = 0,
    base_armor: int = 0,
    hit_plus: int = 0,
    damage_plus: int = 0,
) -> bool:
    """Whether an object of this kind and these properties radiates magic."""
    if item_type == ARMOR:
        return bool(protected) or armor != base_armor
    if item_type == WEAPON:
        return hit_plus != 0 or damage_plus != 0
    return item_type in (POTION, SCROLL, STICK, RING, AMULET)