"""Tests for the Shared member wrapper."""

from zombiegame import Actor, Shared, Weapon
from zombiegame.core.actor import get_member, is_wrapped


def test_shared_unwraps_to_the_same_object():
    claw = Weapon("Claw", 12, 2)

    assert Shared(claw).unwrap() is claw


def test_get_member_passes_plain_values_through():
    claw = Weapon("Claw", 12, 2)

    assert get_member(claw) is claw
    assert get_member(Shared(claw)) is claw
    assert is_wrapped(Shared(claw))
    assert not is_wrapped(claw)


def test_two_actors_holding_one_shared_weapon_see_each_other():
    """Equal payloads only co-share when they are the same object."""
    claw = Weapon("Claw", 12, 2)
    first = Actor("A", 10, Shared(claw))
    second = Actor("B", 10, Shared(claw))
    third = Actor("C", 10, Shared(Weapon("Claw", 12, 2)))

    first.weapon.power = 40

    assert second.weapon.power == 40
    assert third.weapon.power == 12
