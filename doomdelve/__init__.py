"""Dice, rings, potions, the pack, options, key decoding and scores for a terminal dungeon crawler."""

__version__ = "0.1.0"

__all__ = [
    "misc",
    "rings",
    "potions",
    "pack",
    "options",
    "keys",
    "scores",
]