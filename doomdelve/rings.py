"""Ring kinds, how much food they burn and how their bonus is shown."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Callable, Optional


class RingKind(IntEnum):
    PROTECT = 0
    ADDSTR = 1
    SUSTSTR = 2
    SEARCH = 3
    SEEINVIS = 4
    NOP = 5
    AGGR = 6
    ADDHIT = 7
    ADDDAM = 8
    REGEN = 9
    DIGEST = 10
    TELEPORT = 11
    STEALTH = 12
    SUSTARM = 13


# Positive: food used every turn.  Negative: one in that many turns.
_USES = {
    RingKind.PROTECT: 1,
    RingKind.ADDSTR: 1,
    RingKind.SUSTSTR: 1,
    RingKind.SEARCH: -3,
    RingKind.SEEINVIS: -5,
    RingKind.NOP: 0,
    RingKind.AGGR: 0,
    RingKind.ADDHIT: -3,
    RingKind.ADDDAM: -3,
    RingKind.REGEN: 2,
    RingKind.DIGEST: -2,
    RingKind.TELEPORT: 0,
    RingKind.STEALTH: 1,
    RingKind.SUSTARM: 1,
}

_BONUS_RINGS = frozenset(
    {RingKind.PROTECT, RingKind.ADDSTR, RingKind.ADDDAM, RingKind.ADDHIT}
)


def ring_eat(
    kind: Optional[RingKind], rnd: Optional[Callable[[int], int]] = None
) -> int:
    """Food used this turn by a ring of the given kind (None for a bare hand)."""
    if kind is None:
        return 0
    if rnd is None:
        rnd = random.randrange
    eat = _USES[RingKind(kind)]
    if eat < 0:
        eat = 1 if rnd(-eat) == 0 else 0
    if kind == RingKind.DIGEST:
        eat = -eat
    return eat


def ring_num(kind: RingKind, bonus: int, known: bool) -> str:
    """The bracketed bonus shown after a known ring's name, or ''."""
    if not known or RingKind(kind) not in _BONUS_RINGS:
        return ""
    return f" [{bonus:+d}]"