"""Game options: the option table, parsing option strings and editing values."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

MAXINP = 50
ESCAPE = "\x1b"
DEFAULT_ERASE = "\b"
DEFAULT_KILL = "\x15"

Key = Union[str, int]


class InventoryStyle(IntEnum):
    OVER = 0
    SLOW = 1
    CLEAR = 2

    @property
    def label(self) -> str:
        return _INV_NAMES[self]


_INV_NAMES = {
    InventoryStyle.OVER: "Overwrite",
    InventoryStyle.SLOW: "Slow",
    InventoryStyle.CLEAR: "Clear",
}


class EditResult(IntEnum):
    """How editing one option ended."""

    NORM = 0
    QUIT = 1
    MINUS = 2


@dataclass(frozen=True)
class _Spec:
    attr: str
    name: str
    prompt: str
    kind: str  # "bool", "inven" or "str"


_SPECS = (
    _Spec("terse", "terse", "Terse output", "bool"),
    _Spec("flush", "flush", "Flush typeahead during battle", "bool"),
    _Spec("jump", "jump", "Show position only at end of run", "bool"),
    _Spec("seefloor", "seefloor", "Show the lamp-illuminated floor", "bool"),
    _Spec("passgo", "passgo", "Follow turnings in passageways", "bool"),
    _Spec("tombstone", "tombstone", "Print out tombstone when killed", "bool"),
    _Spec("inven", "inven", "Inventory style", "inven"),
    _Spec("name", "name", "Name", "str"),
    _Spec("fruit", "fruit", "Fruit", "str"),
    _Spec("file", "file", "Save file", "str"),
)


@dataclass
class Options:
    """The player's settable options."""

    terse: bool = False
    flush: bool = False
    jump: bool = False
    seefloor: bool = True
    passgo: bool = False
    tombstone: bool = True
    inven: InventoryStyle = InventoryStyle.OVER
    name: str = ""
    fruit: str = "slime-mold"
    file: str = ""

    def describe(self) -> list[str]:
        """One line per option: its prompt, its name and its current value."""
        lines = []
        for spec in _SPECS:
            value = getattr(self, spec.attr)
            if spec.kind == "bool":
                shown = "True" if value else "False"
            elif spec.kind == "inven":
                shown = InventoryStyle(value).label
            else:
                shown = value
            lines.append(f'{spec.prompt} ("{spec.name}"): {shown}')
        return lines


def _isalpha(ch: str) -> bool:
    return ch in string.ascii_letters


def _isprint(ch: str) -> bool:
    return " " <= ch <= "~"


def strucpy(text: str, length: int) -> str:
    """The first ``length`` characters (at most MAXINP), printable ones only."""
    length = min(length, MAXINP)
    return "".join(ch for ch in text[:length] if _isprint(ch))


def parse_opts(options: Options, text: str, home: str = "") -> None:
    """Set options from a comma separated string such as ``ROGUEOPTS``.

    Booleans are given as ``name`` or ``noname``; other options as
    ``name=value``, where a leading ``~`` stands for the home directory.
    Option names may be abbreviated.
    """
    n = len(text)
    pos = 0
    while pos < n:
        end = pos
        while end < n and _isalpha(text[end]):
            end += 1
        name = text[pos:end]
        for spec in _SPECS:
            if spec.name.startswith(name):
                if spec.kind == "bool":
                    setattr(options, spec.attr, True)
                    break
                start = end + 1
                while start < n and text[start] == "=":
                    start += 1
                prefix = ""
                if start < n and text[start] == "~":
                    prefix = home
                    start += 1
                    while start < n and text[start] == "/":
                        start += 1
                stop = start + 1
                while stop < n and text[stop] != ",":
                    stop += 1
                value = text[start:stop]
                if spec.kind == "inven":
                    if value:
                        value = value[0].upper() + value[1:]
                    for style in InventoryStyle:
                        if style.label.startswith(value):
                            options.inven = style
                            break
                else:
                    setattr(options, spec.attr, prefix + strucpy(value, len(value)))
                end = min(stop, n)
                break
            if (
                spec.kind == "bool"
                and name.startswith("no")
                and spec.name.startswith(name[2:])
            ):
                setattr(options, spec.attr, False)
                break
        pos = end
        while pos < n and not _isalpha(text[pos]):
            pos += 1


def _key_stream(keys: Iterable[Key]) -> Iterator[str]:
    for key in keys:
        if isinstance(key, int):
            if key == -1:
                continue
            key = chr(key)
        yield key


def _next_key(stream: Iterator[str]) -> str:
    try:
        return next(stream)
    except StopIteration:
        raise EOFError("no more keys") from None


def edit_bool(current: bool, keys: Iterable[Key]) -> tuple[bool, EditResult]:
    """Edit a boolean option with T, F, return, escape or minus."""
    stream = _key_stream(keys)
    while True:
        ch = _next_key(stream)
        if ch in "tT":
            return True, EditResult.NORM
        if ch in "fF":
            return False, EditResult.NORM
        if ch in "\n\r":
            return current, EditResult.NORM
        if ch == ESCAPE:
            return current, EditResult.QUIT
        if ch == "-":
            return current, EditResult.MINUS


def edit_inventory_style(
    current: InventoryStyle, keys: Iterable[Key]
) -> tuple[InventoryStyle, EditResult]:
    """Edit the inventory style with O, S or C."""
    stream = _key_stream(keys)
    choices = {
        "o": InventoryStyle.OVER,
        "s": InventoryStyle.SLOW,
        "c": InventoryStyle.CLEAR,
    }
    while True:
        ch = _next_key(stream)
        if ch.lower() in choices and len(ch) == 1:
            return choices[ch.lower()], EditResult.NORM
        if ch in "\n\r":
            return current, EditResult.NORM
        if ch == ESCAPE:
            return current, EditResult.QUIT
        if ch == "-":
            return current, EditResult.MINUS


def edit_string(
    current: str,
    keys: Iterable[Key],
    home: str = "",
    erase: str = DEFAULT_ERASE,
    kill: str = DEFAULT_KILL,
) -> tuple[str, EditResult]:
    """Edit a string option; the value changes only if something was typed.

    The erase key takes back a character, the kill key starts over, a
    ``~`` typed first inserts the home directory and a ``-`` typed first
    goes back to the previous option.
    """
    stream = _key_stream(keys)
    buf: list[str] = []
    ch = ""
    while True:
        ch = _next_key(stream)
        if ch in ("\n", "\r", ESCAPE):
            break
        if ch == erase:
            if buf:
                buf.pop()
            continue
        if ch == kill:
            buf = []
            continue
        if not buf:
            if ch == "-":
                break
            if ch == "~":
                buf = list(home)
                continue
        if len(buf) >= MAXINP or not _isprint(ch):
            continue
        buf.append(ch)
    value = current
    if buf:
        typed = "".join(buf)
        value = strucpy(typed, len(typed))
    if ch == "-":
        return value, EditResult.MINUS
    if ch == ESCAPE:
        return value, EditResult.QUIT
    return value, EditResult.NORM