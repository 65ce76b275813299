"""The top-scores list, the names of killers and the tombstone."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Optional

from .misc import Dice, vowelstr

NUMSCORES = 10
NUMNAME = "Ten"

WINNER = 2

_REASONS = ("killed", "quit", "A total winner", "killed with Amulet")

_RIP = (
    "                       __________\n",
    "                      /          \\\n",
    "                     /    REST    \\\n",
    "                    /      IN      \\\n",
    "                   /     PEACE      \\\n",
    "                  /                  \\\n",
    "                  |                  |\n",
    "                  |                  |\n",
    "                  |   killed by a    |\n",
    "                  |                  |\n",
    "                  |       1980       |\n",
    "                 *|     *  *  *      | *\n",
    "         ________)/\\\\_//(\\/(/\\)/\\//\\/|_)_______\n",
)
_RIP_TOP = 8

# Killers that are not monsters: (description, takes an article).
_NON_MONSTERS = {
    "a": ("arrow", True),
    "b": ("bolt", True),
    "d": ("dart", True),
    "h": ("hypothermia", False),
    "s": ("starvation", False),
}
_NOBODY = "Wally the Wonder Badger"

_DEATH_CAUSES = "ABCDEFGHIJKLMNOPQRSTUVWXYZabhds "


@dataclass
class ScoreEntry:
    """One line of the scoreboard; a score of zero marks an empty slot."""

    score: int = 0
    name: str = ""
    flags: int = 0
    level: int = 0
    monster: str = ""
    uid: int = 0


@dataclass
class Scoreboard:
    """The best scores, highest first.

    With ``allscore`` every game may be listed; without it each player
    keeps only one entry for games not won.
    """

    size: int = NUMSCORES
    allscore: bool = True
    entries: list[ScoreEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entries = list(self.entries[: self.size])
        while len(self.entries) < self.size:
            self.entries.append(ScoreEntry())

    def insert(
        self,
        amount: int,
        name: str,
        flags: int,
        level: int,
        monster: str,
        uid: int,
    ) -> Optional[int]:
        """Post a score; returns the index it went to, or None if it did not fit."""
        end = len(self.entries)
        pos = end
        for i, entry in enumerate(self.entries):
            if amount > entry.score:
                pos = i
                break
            if (
                not self.allscore
                and flags != WINNER
                and entry.uid == uid
                and entry.flags != WINNER
            ):
                break
        if pos >= end:
            return None
        drop = end - 1
        if flags != WINNER and not self.allscore:
            for i in range(pos, end):
                entry = self.entries[i]
                if entry.uid == uid and entry.flags != WINNER:
                    drop = i
                    break
        del self.entries[drop]
        self.entries.insert(
            pos,
            ScoreEntry(
                score=amount,
                name=name,
                flags=flags,
                level=level,
                monster=monster,
                uid=uid,
            ),
        )
        return pos

    def format(self, monster_names: Optional[Mapping[str, str]] = None) -> list[str]:
        """The scoreboard as printed at the end of a game."""
        title = "Scores" if self.allscore else "Rogueists"
        lines = [f"Top {NUMNAME} {title}:", "   Score Name"]
        for rank, entry in enumerate(self.entries, start=1):
            if not entry.score:
                break
            line = (
                f"{rank:2d} {entry.score:5d} {entry.name}: "
                f"{_REASONS[entry.flags]} on level {entry.level}"
            )
            if entry.flags in (0, 3):
                line += " by " + killname(entry.monster, True, monster_names)
            lines.append(line + ".")
        return lines

    @classmethod
    def load(cls, path: str | os.PathLike[str], size: int = NUMSCORES) -> Scoreboard:
        """Read a scoreboard; a missing file gives an empty one."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            return cls(size=size)
        entries = [ScoreEntry(**item) for item in data.get("scores", [])]
        return cls(size=size, allscore=bool(data.get("allscore", True)), entries=entries)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the scoreboard, replacing the file in one step."""
        data = {
            "allscore": self.allscore,
            "scores": [asdict(entry) for entry in self.entries],
        }
        directory = os.path.dirname(os.fspath(path)) or "."
        fd, tmp = tempfile.mkstemp(dir=directory, prefix=".scores-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle)
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise


def killname(
    monst: str, doart: bool, monster_names: Optional[Mapping[str, str]] = None
) -> str:
    """The name of what killed the player, with 'a'/'an' if ``doart``.

    Monster letters are looked up in ``monster_names``; a missing name
    raises KeyError.
    """
    if monst.isupper():
        if monster_names is None:
            raise KeyError(monst)
        name = monster_names[monst]
        article = True
    else:
        name, article = _NON_MONSTERS.get(monst, (_NOBODY, False))
    if doart and article:
        return f"a{vowelstr(name)} {name}"
    return name


def center(text: str) -> int:
    """The column that centres the text on the tombstone."""
    return 28 - (len(text) + 1) // 2


def _put(lines: list[str], row: int, col: int, text: str) -> None:
    index = row - _RIP_TOP
    line = lines[index]
    if len(line) < col + len(text):
        line = line.ljust(col + len(text))
    lines[index] = line[:col] + text + line[col + len(text):]


def tombstone(name: str, killer: str, gold: int, year: int, monst: str) -> list[str]:
    """The lines of the tombstone drawn for a dead player."""
    lines = [line.rstrip("\n") for line in _RIP]
    _put(lines, 17, center(killer), killer)
    if monst in ("s", "h"):
        _put(lines, 16, 32, " ")
    else:
        _put(lines, 16, 33, vowelstr(killer))
    _put(lines, 14, center(name), name)
    purse = f"{gold} Au"
    _put(lines, 15, center(purse), purse)
    _put(lines, 18, 26, f"{year:4d}")
    return lines


def death_monst(dice: Dice) -> str:
    """A cause of death picked at random."""
    return _DEATH_CAUSES[dice.rnd(len(_DEATH_CAUSES))]