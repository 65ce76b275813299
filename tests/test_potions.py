import pytest

from doomdelve.misc import AMULET, ARMOR, FOOD, GOLD, POTION, RING, SCROLL, STICK, WEAPON
from doomdelve.potions import (
    HEALTIME,
    HUHDURATION,
    SEEDURATION,
    Potion,
    potion_action,
    is_magic,
)


@pytest.mark.parametrize(
    "potion",
    [
        Potion.POISON,
        Potion.STRENGTH,
        Potion.HEALING,
        Potion.MFIND,
        Potion.TFIND,
        Potion.RAISE,
        Potion.XHEAL,
        Potion.HASTE,
        Potion.RESTORE,
    ],
)
def test_potions_without_standard_action(potion):
    assert potion_action(potion) is None


def test_confusion_action():
    action = potion_action(Potion.CONFUSE)
    assert action.daemon == "unconfuse"
    assert action.duration == HUHDURATION
    assert action.high == "what a tripy feeling!"
    assert action.straight == "wait, what's going on here. Huh? What? Who?"


def test_lsd_messages_agree():
    action = potion_action(Potion.LSD)
    assert action.high == action.straight
    assert action.duration == SEEDURATION


def test_levitation_uses_heal_time():
    action = potion_action(Potion.LEVIT)
    assert action.duration == HEALTIME
    assert action.straight == "you start to float in the air"


def test_see_invisible_message_names_fruit():
    action = potion_action(Potion.SEEINVIS)
    assert action.straight.format(fruit="kiwi") == "this potion tastes like kiwi juice"


def test_blind_action():
    action = potion_action(Potion.BLIND)
    assert action.daemon == "sight"
    assert action.high == "oh, bummer!  Everything is dark!  Help!"


def test_potion_action_accepts_plain_int():
    assert potion_action(int(Potion.BLIND)) == potion_action(Potion.BLIND)


def test_unknown_potion_rejected():
    with pytest.raises(ValueError):
        potion_action(99)


@pytest.mark.parametrize("kind", [POTION, SCROLL, STICK, RING, AMULET])
def test_always_magic(kind):
    assert is_magic(kind) is True


@pytest.mark.parametrize("kind", [FOOD, GOLD])
def test_never_magic(kind):
    assert is_magic(kind, protected=True, armor=1, hit_plus=3) is False


def test_armor_magic():
    assert is_magic(ARMOR, armor=5, base_armor=5) is False
    assert is_magic(ARMOR, armor=4, base_armor=5) is True
    assert is_magic(ARMOR, protected=True, armor=5, base_armor=5) is True


def test_weapon_magic():
    assert is_magic(WEAPON) is False
    assert is_magic(WEAPON, hit_plus=1) is True
    assert is_magic(WEAPON, damage_plus=-1) is True