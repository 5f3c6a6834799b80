"""Tests for the alias / shallow / deep copy operations.

Critical Invariants:
- bind_alias returns the very same object
- shallow_copy shares weapon and attack list, nothing else
- deep_copy shares nothing, in either direction, and starts out equal
"""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zombiegame import (
    Actor,
    AttackDescriptor,
    Weapon,
    bind_alias,
    deep_copy,
    shallow_copy,
    sharing_report,
)


# Alias


def test_alias_is_the_same_object(bob):
    karen = bind_alias(bob)

    assert karen is bob
    assert sharing_report(bob, karen).same_actor


def test_alias_rename_changes_original(bob):
    karen = bind_alias(bob)
    karen.name = "Karen"

    assert bob.name == "Karen"


# Shallow copy


def test_shallow_copy_shares_weapon(bob):
    """CRITICAL: the shallow copy's weapon IS the source's weapon."""
    karen = shallow_copy(bob)

    assert karen is not bob
    assert karen.weapon is bob.weapon

    karen.weapon.power = 30
    assert bob.weapon.power == 30


def test_shallow_copy_shares_attack_list_both_ways(bob):
    karen = shallow_copy(bob)

    karen.add_secondary_attack(AttackDescriptor("Spit", 5, 2))
    assert len(bob.secondary_attacks) == 3

    bob.add_secondary_attack(AttackDescriptor("Leg", 8, 4))
    assert len(karen.secondary_attacks) == 4


def test_shallow_copy_primitives_are_independent(bob):
    karen = shallow_copy(bob)

    karen.name = "Karen"
    karen.move(10, 10)
    karen.take_damage(40)

    assert bob.name == "Bob"
    assert bob.position == (5, 5)
    assert bob.current_health == 100


def test_shallow_copy_carries_primitives(bob):
    bob.take_damage(30)
    karen = shallow_copy(bob)

    assert karen.name == "Bob"
    assert (karen.current_health, karen.max_health) == (70, 100)
    assert karen.position == (5, 5)


def test_shallow_copy_marks_members_as_shared(bob):
    karen = shallow_copy(bob)

    assert karen.shared_members == frozenset({"weapon", "secondary_attacks"})
    assert bob.shared_members == frozenset()


def test_copy_module_copy_is_shallow(bob):
    karen = copy.copy(bob)

    assert karen is not bob
    assert karen.weapon is bob.weapon
    assert karen.secondary_attacks is bob.secondary_attacks


# Deep copy


def test_deep_copy_shares_no_storage(bob):
    """CRITICAL: no owned object is reachable from both actors."""
    karen = deep_copy(bob)
    report = sharing_report(bob, karen)

    assert not report.same_actor
    assert not report.same_weapon
    assert not report.same_attacks
    assert report.shared_attack_elements == 0
    assert report.independent
    assert karen.shared_members == frozenset()


def test_deep_copy_starts_equal(bob):
    karen = deep_copy(bob)

    assert karen.weapon == bob.weapon
    assert karen.secondary_attacks == bob.secondary_attacks
    assert [a.label for a in karen.secondary_attacks] == ["Arm", "Rock"]
    assert (karen.name, karen.current_health, karen.max_health) == ("Bob", 100, 100)
    assert karen.position == bob.position


def test_deep_copy_isolates_copy_mutations(bob):
    karen = deep_copy(bob)

    karen.name = "Karen"
    karen.weapon.power = 30
    karen.weapon.kind = "Claw"
    karen.move(10, 10)
    karen.secondary_attacks[0].power = 99
    karen.add_secondary_attack(AttackDescriptor("Spit", 5, 2))
    karen.take_damage(60)

    assert bob.name == "Bob"
    assert bob.weapon == Weapon("Bite", 15, 1)
    assert bob.position == (5, 5)
    assert bob.secondary_attacks == [AttackDescriptor("Arm", 20, 5), AttackDescriptor("Rock", 10, 3)]
    assert bob.current_health == 100


def test_deep_copy_isolates_source_mutations(bob):
    karen = deep_copy(bob)

    bob.weapon.power = 1
    bob.secondary_attacks.clear()
    bob.move(1, 1)

    assert karen.weapon.power == 15
    assert len(karen.secondary_attacks) == 2
    assert karen.position == (5, 5)


def test_deep_copy_of_shallow_copy_owns_everything(bob):
    """Deep copying an actor that holds shared members yields owned members."""
    middle = shallow_copy(bob)
    last = deep_copy(middle)

    assert last.shared_members == frozenset()
    assert sharing_report(bob, last).independent


def test_deep_copy_keeps_narrator(bob, sink):
    """The narration sink is a capability, not owned state."""
    karen = deep_copy(bob)

    assert karen.narrator is bob.narrator
    karen.move(1, 0)
    assert sink.lines == ["Bob moves to position (6, 5)"]


@pytest.mark.parametrize("make_copy", [Actor.copy, copy.deepcopy], ids=["method", "copy_module"])
def test_other_deep_copy_entry_points(bob, make_copy):
    karen = make_copy(bob)

    assert sharing_report(bob, karen).independent
    assert karen.weapon == bob.weapon


def test_copy_module_deepcopy_keeps_outside_references_to_members(bob):
    """A weapon reachable both through the actor and directly stays one object."""
    cloned = copy.deepcopy({"actor": bob, "held": bob.weapon, "throws": bob.secondary_attacks})

    assert cloned["held"] is cloned["actor"].weapon
    assert cloned["throws"] is cloned["actor"].secondary_attacks
    assert cloned["held"] is not bob.weapon
    assert cloned["actor"].shared_members == frozenset()


def test_copy_module_deepcopy_reuses_members_copied_before_the_actor(bob):
    """Members met earlier in the structure are reused by the actor copy."""
    cloned = copy.deepcopy([bob.secondary_attacks[0], bob.weapon, bob])
    first_throw, held, actor = cloned

    assert actor.weapon is held
    assert actor.secondary_attacks[0] is first_throw
    assert sharing_report(bob, actor).independent


def test_copy_module_deepcopy_of_two_actors_sharing_a_weapon(bob):
    """Sharing between actors inside one deepcopy call is mirrored, not leaked."""
    karen = shallow_copy(bob)
    bob_copy, karen_copy = copy.deepcopy([bob, karen])

    assert bob_copy.weapon is karen_copy.weapon
    assert bob_copy.secondary_attacks is karen_copy.secondary_attacks
    assert bob_copy.weapon is not bob.weapon


# Argument checking


@pytest.mark.parametrize("operation", [bind_alias, shallow_copy, deep_copy])
def test_operations_reject_non_actors(operation):
    with pytest.raises(TypeError, match="expects an Actor"):
        operation(Weapon("Bite", 10, 1))


def test_sharing_report_rejects_non_actors(bob):
    with pytest.raises(TypeError, match="sharing_report expects an Actor"):
        sharing_report(bob, "Karen")  # type: ignore[arg-type]


# Property tests


attack_strategy = st.builds(
    AttackDescriptor,
    label=st.text(min_size=1, max_size=8),
    power=st.integers(min_value=1, max_value=100),
    cooldown=st.integers(min_value=0, max_value=30),
)


@st.composite
def actor_strategy(draw):
    """Generate actors with random weapons, attacks and positions."""
    actor = Actor(
        draw(st.text(min_size=1, max_size=10)),
        draw(st.integers(min_value=1, max_value=500)),
        Weapon(
            draw(st.sampled_from(["Bite", "Claw", "Club"])),
            draw(st.integers(min_value=1, max_value=100)),
            draw(st.integers(min_value=1, max_value=5)),
        ),
        secondary_attacks=draw(st.lists(attack_strategy, max_size=5)),
    )
    actor.move(
        draw(st.integers(min_value=-50, max_value=50)),
        draw(st.integers(min_value=-50, max_value=50)),
    )
    return actor


@given(actor_strategy(), st.integers(min_value=1, max_value=1000), st.integers(-20, 20))
def test_deep_copy_mutations_never_leak(actor, new_power, delta):
    before_weapon = actor.weapon.copy()
    before_attacks = [a.copy() for a in actor.secondary_attacks]
    before_position = actor.position

    clone = deep_copy(actor)
    clone.weapon.power = new_power
    clone.move(delta, -delta)
    for attack in clone.secondary_attacks:
        attack.power = new_power
    clone.add_secondary_attack(AttackDescriptor("Extra", 1, 0))

    assert actor.weapon == before_weapon
    assert actor.secondary_attacks == before_attacks
    assert actor.position == before_position


@given(actor_strategy(), st.integers(min_value=1, max_value=1000))
def test_shallow_copy_weapon_changes_always_leak(actor, new_power):
    clone = shallow_copy(actor)
    clone.weapon.power = new_power

    assert actor.weapon.power == new_power
    assert clone.secondary_attacks is actor.secondary_attacks
