import pytest

from doomdelve.options import (
    MAXINP,
    EditResult,
    InventoryStyle,
    Options,
    edit_bool,
    edit_inventory_style,
    edit_string,
    parse_opts,
    strucpy,
)


def test_parse_boolean_on_and_off():
    opts = Options()
    parse_opts(opts, "terse,nojump,notombstone")
    assert opts.terse is True
    assert opts.jump is False
    assert opts.tombstone is False


def test_parse_abbreviated_boolean():
    opts = Options()
    parse_opts(opts, "pass")
    assert opts.passgo is True


def test_parse_string_values():
    opts = Options()
    parse_opts(opts, "name=Gandalf,fruit=mango,terse")
    assert opts.name == "Gandalf"
    assert opts.fruit == "mango"
    assert opts.terse is True


def test_parse_home_expansion():
    opts = Options()
    parse_opts(opts, "file=~/saves/game", home="/home/player/")
    assert opts.file == "/home/player/saves/game"


def test_parse_inventory_style_prefix():
    opts = Options()
    parse_opts(opts, "inven=slow")
    assert opts.inven is InventoryStyle.SLOW
    parse_opts(opts, "inven=c")
    assert opts.inven is InventoryStyle.CLEAR


def test_strucpy_drops_control_and_caps_length():
    assert strucpy("ab\x01cd", 5) == "abcd"
    assert len(strucpy("x" * 100, 100)) == MAXINP
    assert strucpy("hello", 3) == "hel"


def test_edit_bool():
    assert edit_bool(False, "xt") == (True, EditResult.NORM)
    assert edit_bool(True, "F") == (False, EditResult.NORM)
    assert edit_bool(True, "\n") == (True, EditResult.NORM)
    assert edit_bool(True, "\x1b") == (True, EditResult.QUIT)
    assert edit_bool(False, "-") == (False, EditResult.MINUS)


def test_edit_bool_runs_out_of_keys():
    with pytest.raises(EOFError):
        edit_bool(False, "zz")


def test_edit_inventory_style():
    assert edit_inventory_style(InventoryStyle.OVER, "S") == (
        InventoryStyle.SLOW,
        EditResult.NORM,
    )
    assert edit_inventory_style(InventoryStyle.SLOW, "\r") == (
        InventoryStyle.SLOW,
        EditResult.NORM,
    )
    assert edit_inventory_style(InventoryStyle.SLOW, "-")[1] is EditResult.MINUS


def test_edit_string_typing_and_erase():
    value, result = edit_string("old", "abx\bc\n")
    assert (value, result) == ("abc", EditResult.NORM)


def test_edit_string_empty_keeps_value():
    assert edit_string("old", "\n") == ("old", EditResult.NORM)


def test_edit_string_kill_and_home():
    value, result = edit_string("old", "zz\x15~x\n", home="/h/")
    assert value == "/h/x"
    assert result is EditResult.NORM


def test_edit_string_minus_first_goes_back():
    assert edit_string("old", "-") == ("old", EditResult.MINUS)
    assert edit_string("old", "a-\n") == ("a-", EditResult.NORM)


def test_edit_string_escape_still_keeps_typed_text():
    assert edit_string("old", "new\x1b") == ("new", EditResult.QUIT)


def test_describe_round_trips_values():
    opts = Options(name="Frodo", inven=InventoryStyle.CLEAR)
    lines = opts.describe()
    assert lines[0] == 'Terse output ("terse"): False'
    assert any(line.endswith(": Frodo") for line in lines)
    assert any(line.endswith(InventoryStyle.CLEAR.label) for line in lines)
    assert len(lines) == 10