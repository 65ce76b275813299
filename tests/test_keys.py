import pytest

from doomdelve.keys import (
    ESCAPE,
    KEY_B2,
    KEY_BACKSPACE,
    KEY_HOME,
    KEY_LEFT,
    KEY_NPAGE,
    KEY_SLEFT,
    KeyDecoder,
    ctrl,
    decode_key,
)


def test_ctrl_of_letter():
    assert ctrl("H") == 8
    assert ctrl(ord("H")) == ctrl("H")


def test_plain_key_passes_through():
    assert decode_key("a") == ord("a")


@pytest.mark.parametrize(
    "key, expected",
    [(KEY_LEFT, "h"), (KEY_HOME, "y"), (KEY_NPAGE, "n"), (KEY_B2, "u")],
)
def test_cursor_keys_walk(key, expected):
    assert decode_key([key]) == ord(expected)


def test_shifted_keys_run():
    assert decode_key([KEY_SLEFT]) == ctrl("H")
    assert decode_key([KEY_BACKSPACE]) == ctrl("H")


def test_escape_alone_times_out():
    assert decode_key([ESCAPE, None]) == ESCAPE
    assert decode_key([ESCAPE]) == ESCAPE


@pytest.mark.parametrize(
    "seq, expected",
    [
        ("\x1b[D", ctrl("H")),
        ("\x1bOt", ord("h")),
        ("\x1b[H", ord("y")),
        ("\x1b[G", ord(".")),
        ("\x1bF^", ctrl("H")),
    ],
)
def test_escape_sequences(seq, expected):
    assert decode_key(seq) == expected


def test_trailing_sequences():
    assert decode_key("\x1b[1~") == ord("y")
    assert decode_key("\x1b[5^") == ctrl("U")
    assert decode_key("\x1b\x1b[5~") == ctrl("U")


def test_escape_then_curses_key():
    assert decode_key([ESCAPE, KEY_LEFT]) == ctrl("H")


def test_alt_letter_gives_letter():
    assert decode_key([ESCAPE, ord("x")]) == ord("x")


def test_high_bit_is_stripped():
    assert decode_key([ord("a") | 0x80]) == ord("a")


def test_shared_stream_reads_commands_in_turn():
    stream = iter("\x1b[Dk")
    decoder = KeyDecoder()
    assert decoder.decode(stream) == ctrl("H")
    assert decoder.decode(stream) == ord("k")
    with pytest.raises(EOFError):
        decoder.decode(stream)


def test_empty_stream_raises():
    with pytest.raises(EOFError):
        decode_key([])


def test_callbacks_are_called():
    events = []
    decoder = KeyDecoder(
        on_escape=lambda: events.append("esc"), on_finish=lambda: events.append("done")
    )
    assert decoder.decode("\x1bOA") == ctrl("K")
    assert events == ["esc", "done"]