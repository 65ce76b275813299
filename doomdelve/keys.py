"""Turning raw terminal key codes into the game's movement commands.

Cursor and keypad keys come from terminals in many shapes: as curses key
codes, or as escape sequences that curses did not recognise.  Plain keys
become walk commands (``hjklyubn``); shifted, control or alt keys become
run commands (control versions of the same letters).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Callable, Optional, Union

ESCAPE = 27

# Curses key codes (ncurses numbering).
KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_LEFT = 0o404
KEY_RIGHT = 0o405
KEY_HOME = 0o406
KEY_BACKSPACE = 0o407
KEY_EOL = 0o517
KEY_NPAGE = 0o522
KEY_PPAGE = 0o523
KEY_LL = 0o533
KEY_A1 = 0o534
KEY_A3 = 0o535
KEY_B2 = 0o536
KEY_C1 = 0o537
KEY_C3 = 0o540
KEY_END = 0o550
KEY_SEND = 0o602
KEY_SHOME = 0o607
KEY_SLEFT = 0o611
KEY_SNEXT = 0o614
KEY_SPREVIOUS = 0o620
KEY_SRIGHT = 0o622

Key = Union[int, str, None]


def ctrl(ch: Union[int, str]) -> int:
    """The control-key code for a character."""
    code = ord(ch) if isinstance(ch, str) else ch
    return code & 0o37


def _upper(code: int) -> int:
    return ord(chr(code).upper()) if 0 <= code < 0x110000 else code


def _lower(code: int) -> int:
    return ord(chr(code).lower()) if 0 <= code < 0x110000 else code


class _Mode(Enum):
    NORMAL = 0
    ESC = 1
    KEYPAD = 2
    TRAIL = 3


# Keys following ESC that curses did decode (Cygwin console, PuTTY).
_ESC_KEYS = {
    KEY_LEFT: ctrl("H"),
    KEY_RIGHT: ctrl("L"),
    KEY_UP: ctrl("K"),
    KEY_DOWN: ctrl("J"),
    KEY_HOME: ctrl("Y"),
    KEY_PPAGE: ctrl("U"),
    KEY_NPAGE: ctrl("N"),
    KEY_END: ctrl("B"),
}

# Final characters of ESC F / ESC [ / ESC O sequences.
_KEYPAD_KEYS = {
    ord("^"): ctrl("H"),
    ord("$"): ctrl("L"),
    ord("H"): ord("y"),
    1: ctrl("K"),
    2: ctrl("J"),
    3: ctrl("L"),
    4: ctrl("H"),
    263: ctrl("Y"),
    19: ctrl("U"),
    20: ctrl("N"),
    21: ctrl("B"),
    ord("G"): ord("."),
    ord("D"): ctrl("H"),
    ord("C"): ctrl("L"),
    ord("A"): ctrl("K"),
    ord("B"): ctrl("J"),
    ord("t"): ord("h"),
    ord("v"): ord("l"),
    ord("x"): ord("k"),
    ord("r"): ord("j"),
    ord("w"): ord("y"),
    ord("y"): ord("u"),
    ord("s"): ord("n"),
    ord("q"): ord("b"),
    ord("u"): ord("."),
}

# Digits that start a sequence ending in '~' or '^', with the letter they mean.
_TRAIL_STARTS = {
    ord("7"): ord("Y"),
    ord("5"): ord("U"),
    ord("6"): ord("N"),
    ord("1"): ord("y"),
    ord("4"): ord("b"),
}

_PLAIN_KEYS = {
    KEY_LEFT: ord("h"),
    KEY_DOWN: ord("j"),
    KEY_UP: ord("k"),
    KEY_RIGHT: ord("l"),
    KEY_HOME: ord("y"),
    KEY_PPAGE: ord("u"),
    KEY_END: ord("b"),
    KEY_LL: ord("b"),
    KEY_NPAGE: ord("n"),
    KEY_A1: ord("y"),
    KEY_A3: ord("u"),
    KEY_C1: ord("b"),
    KEY_C3: ord("n"),
    # Should be '.', but that trips up PuTTY on Linux.
    KEY_B2: ord("u"),
    KEY_SRIGHT: ctrl("L"),
    KEY_SLEFT: ctrl("H"),
    KEY_SHOME: ctrl("Y"),
    KEY_SPREVIOUS: ctrl("U"),
    KEY_SEND: ctrl("B"),
    KEY_SNEXT: ctrl("N"),
    0x146: ctrl("K"),  # shift-up
    0x145: ctrl("J"),  # shift-down
    KEY_EOL: ctrl("B"),
    # MSYS rxvt console
    511: ctrl("J"),
    512: ctrl("J"),
    514: ctrl("H"),
    516: ctrl("L"),
    518: ctrl("K"),
    519: ctrl("K"),
    KEY_BACKSPACE: ctrl("H"),
}


def _code(key: Key) -> Optional[int]:
    if key is None:
        return None
    if isinstance(key, str):
        return ord(key)
    return key


class KeyDecoder:
    """Reads one command from a stream of key codes.

    A key of ``None`` stands for a read that timed out.  ``on_escape`` is
    called when an escape starts a sequence (the moment to switch the
    terminal to a short read timeout); ``on_finish`` when the command is
    complete (the moment to switch back).
    """

    def __init__(
        self,
        on_escape: Optional[Callable[[], None]] = None,
        on_finish: Optional[Callable[[], None]] = None,
    ) -> None:
        self.on_escape = on_escape
        self.on_finish = on_finish

    def decode(self, keys: Iterable[Key]) -> int:
        """Consume keys up to the end of one command and return its code.

        Pass an iterator to read several commands from one stream.  Raises
        EOFError if the stream ends before any key of the command.
        """
        stream: Iterator[Key] = iter(keys)
        try:
            return self._decode(stream) & 0x7F
        finally:
            if self.on_finish is not None:
                self.on_finish()

    def _decode(self, stream: Iterator[Key]) -> int:
        mode = _Mode.NORMAL
        mode2 = _Mode.NORMAL
        lastch = 0
        while True:
            try:
                ch = _code(next(stream))
            except StopIteration:
                if mode is _Mode.NORMAL:
                    raise EOFError("no more keys") from None
                ch = None
            if ch is None:
                return ESCAPE

            if mode is _Mode.TRAIL:
                if ch == ord("^"):
                    ch = ctrl(_upper(lastch))
                if ch == ord("~"):
                    ch = _lower(lastch)
                if mode2 is _Mode.ESC:
                    ch = ctrl(_upper(ch))
                return ch

            if mode is _Mode.ESC:
                if ch == ESCAPE:
                    mode2 = _Mode.ESC
                    continue
                if ch in (ord("F"), ord("O"), ord("[")):
                    mode = _Mode.KEYPAD
                    continue
                return _ESC_KEYS.get(ch, ch)

            if mode is _Mode.KEYPAD:
                if ch in _TRAIL_STARTS:
                    lastch = _TRAIL_STARTS[ch]
                    mode = _Mode.TRAIL
                    continue
                ch = _KEYPAD_KEYS.get(ch, ch)

            if ch == ESCAPE:
                if self.on_escape is not None:
                    self.on_escape()
                mode = _Mode.ESC
                continue

            return _PLAIN_KEYS.get(ch, ch)


def decode_key(keys: Iterable[Key]) -> int:
    """Decode one command from a stream of key codes."""
    return KeyDecoder().decode(keys)