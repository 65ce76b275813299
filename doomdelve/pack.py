"""The hero's pack: what is carried, in what order, under which letter."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .misc import AMULET, FOOD, POTION, RING, SCROLL, STICK

MAXPACK = 23
CALLABLE = -1
R_OR_S = -2

_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_MULTIPLES = frozenset({POTION, SCROLL, FOOD})


class PackFullError(Exception):
    """There is no room in the pack for another object."""


@dataclass(eq=False)
class Item:
    """An object the hero can carry."""

    type: str
    which: int = 0
    count: int = 1
    group: int = 0
    name: str = ""
    packch: str = ""
    found: bool = False


class Pack:
    """The ordered contents of the hero's pack."""

    def __init__(self) -> None:
        self.items: list[Item] = []
        self.inpack = 0
        self.last_pick: Optional[Item] = None
        self._used: set[str] = set()

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_amulet(self) -> bool:
        return any(item.type == AMULET for item in self.items)

    def _make_room(self) -> None:
        if self.inpack + 1 > MAXPACK:
            raise PackFullError("there's no room in your pack")
        self.inpack += 1

    def add(self, item: Item) -> Item:
        """Put an object in the pack and return the entry now holding it.

        Like objects are kept together; potions, scrolls and food of the
        same kind, and grouped objects of the same group, are merged into
        one entry.  Raises PackFullError when there is no room.
        """
        if not self.items:
            self._make_room()
            item.packch = self.pack_char()
            self.items.append(item)
            item.found = True
            return item

        after: Optional[int] = None
        merged: Optional[Item] = None
        items = self.items
        i = 0
        while i < len(items):
            op = items[i]
            if op.type != item.type:
                after = i
                i += 1
                continue
            while op.type == item.type and op.which != item.which:
                after = i
                if i + 1 == len(items):
                    break
                i += 1
                op = items[i]
            if op.type == item.type and op.which == item.which:
                if op.type in _MULTIPLES:
                    self._make_room()
                    op.count += 1
                    merged = op
                elif item.group:
                    after = i
                    while (
                        op.type == item.type
                        and op.which == item.which
                        and op.group != item.group
                    ):
                        after = i
                        if i + 1 == len(items):
                            break
                        i += 1
                        op = items[i]
                    if (
                        op.type == item.type
                        and op.which == item.which
                        and op.group == item.group
                    ):
                        op.count += item.count
                        merged = op
                else:
                    after = i
            break

        if merged is not None:
            merged.found = True
            return merged

        self._make_room()
        item.packch = self.pack_char()
        position = len(items) if after is None else after + 1
        items.insert(position, item)
        item.found = True
        return item

    def leave(self, item: Item, newobj: bool = False, all_: bool = False) -> Item:
        """Take an object (one of a heap, unless ``all_``) out of the pack.

        With ``newobj`` a separate object of count one is returned for a
        single item taken from a heap.
        """
        self.inpack -= 1
        if item.count > 1 and not all_:
            self.last_pick = item
            item.count -= 1
            if item.group:
                self.inpack += 1
            if newobj:
                single = copy.copy(item)
                single.count = 1
                return single
            return item
        self.last_pick = None
        self._used.discard(item.packch)
        self.items.remove(item)
        return item

    def pack_char(self) -> str:
        """Claim and return the first unused pack letter."""
        for letter in _LETTERS:
            if letter not in self._used:
                self._used.add(letter)
                return letter
        raise PackFullError("no pack letters left")

    def inventory(self, kind: Optional[str | int] = None) -> list[str]:
        """Lines listing the objects of a kind (all objects when None).

        ``CALLABLE`` selects everything but food and the amulet;
        ``R_OR_S`` selects rings and sticks.
        """
        lines = []
        for item in self.items:
            if (
                kind
                and kind != item.type
                and not (kind == CALLABLE and item.type not in (FOOD, AMULET))
                and not (kind == R_OR_S and item.type in (RING, STICK))
            ):
                continue
            lines.append(f"{item.packch}) {item.name}")
        return lines

    def find(self, ch: str) -> Optional[Item]:
        """The object carried under a pack letter, or None."""
        for item in self.items:
            if item.packch == ch:
                return item
        return None