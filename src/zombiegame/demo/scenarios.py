"""The three copy demonstrations.

Each function narrates to a sink and returns a DemoResult holding snapshots and the
identity observations it made, so callers (and tests) can check the outcome
without reading console output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zombiegame.config import DemoSettings
from zombiegame.core import (
    Actor,
    AttackDescriptor,
    Weapon,
    bind_alias,
    deep_copy,
    shallow_copy,
)
from zombiegame.narration import ActorSnapshot, NarrationSink

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DemoResult:
    """Outcome of one demonstration.

    Attributes:
        title: Demonstration heading.
        snapshots: Actor states captured along the way, keyed by label
            (e.g. "bob_after").
        observations: Named facts the demonstration checked, e.g.
            {"same_weapon": True}.
    """

    title: str
    snapshots: dict[str, ActorSnapshot] = field(default_factory=dict)
    observations: dict[str, bool] = field(default_factory=dict)


def make_bob(narrator: NarrationSink, *attacks: AttackDescriptor) -> Actor:
    """Bob: 100 HP, a 15-power bite, and whatever secondary attacks are given."""
    bob = Actor("Bob", 100, Weapon("Bite", 15, 1), narrator=narrator)
    for attack in attacks:
        bob.add_secondary_attack(attack)
    return bob


def _heading(sink: NarrationSink, title: str, settings: DemoSettings) -> None:
    logger.info("Running demonstration: %s", title)
    sink.emit(title)
    sink.emit("-" * settings.heading_width)


def demonstrate_alias(sink: NarrationSink, settings: DemoSettings | None = None) -> DemoResult:
    """Rename an alias and watch the original change with it."""
    settings = settings or DemoSettings()
    result = DemoResult(title="DEMONSTRATION 1: Reference Copy Problem")
    _heading(sink, result.title, settings)

    bob = make_bob(sink)
    karen = bind_alias(bob)
    sink.emit(f"Created Bob: {bob}")
    sink.emit("Attempted to copy Bob to Karen using: karen = bind_alias(bob)")

    karen.name = "Karen"
    result.snapshots["bob_after"] = ActorSnapshot.of(bob)
    result.snapshots["karen_after"] = ActorSnapshot.of(karen)
    result.observations["same_object"] = bob is karen
    result.observations["original_renamed"] = bob.name == "Karen"

    sink.emit("")
    sink.emit("After changing name to 'Karen':")
    sink.emit(f"Bob: {bob}")
    sink.emit(f"Karen: {karen}")
    sink.emit(f"Are they the same object? {bob is karen}")
    sink.emit("PROBLEM: Bob's name also changed!")
    return result


def demonstrate_shallow_copy(
    sink: NarrationSink, settings: DemoSettings | None = None
) -> DemoResult:
    """Change a shallow copy's weapon and watch the original's weapon change too."""
    settings = settings or DemoSettings()
    result = DemoResult(title="DEMONSTRATION 2: Shallow Copy Problem")
    _heading(sink, result.title, settings)

    bob = make_bob(sink, AttackDescriptor("Arm", 20, 5))
    karen = shallow_copy(bob)
    karen.name = "Karen"

    sink.emit("Created Bob with weapon and secondary attack")
    sink.emit("Created Karen using shallow copy")
    sink.emit("")
    sink.emit("Initial state:")
    sink.emit(f"Bob: {bob}")
    sink.emit(f"Karen: {karen}")
    result.snapshots["bob_before"] = ActorSnapshot.of(bob)
    result.snapshots["karen_before"] = ActorSnapshot.of(karen)

    sink.emit("")
    sink.emit("Modifying Karen's weapon damage to 30...")
    karen.weapon.set_power(30)
    sink.emit(f"Bob's weapon: {bob.weapon}")
    sink.emit(f"Karen's weapon: {karen.weapon}")
    sink.emit("PROBLEM: Bob's weapon damage also changed!")
    sink.emit(f"Are weapons the same object? {bob.weapon is karen.weapon}")

    result.snapshots["bob_after"] = ActorSnapshot.of(bob)
    result.snapshots["karen_after"] = ActorSnapshot.of(karen)
    result.observations["same_object"] = bob is karen
    result.observations["same_weapon"] = bob.weapon is karen.weapon
    result.observations["same_attacks"] = bob.secondary_attacks is karen.secondary_attacks
    result.observations["original_weapon_changed"] = bob.weapon.power == 30
    result.observations["original_name_kept"] = bob.name == "Bob"
    return result


def demonstrate_deep_copy(
    sink: NarrationSink, settings: DemoSettings | None = None
) -> DemoResult:
    """Mutate a deep copy in every way and show the original is untouched."""
    settings = settings or DemoSettings()
    result = DemoResult(title="DEMONSTRATION 3: Deep Copy Solution")
    _heading(sink, result.title, settings)

    bob = make_bob(sink, AttackDescriptor("Arm", 20, 5), AttackDescriptor("Rock", 10, 3))
    bob.move(5, 5)

    karen = deep_copy(bob)
    karen.name = "Karen"

    sink.emit("Created Bob with weapon and secondary attacks")
    sink.emit("Created Karen using deep copy")
    sink.emit("")
    sink.emit("Initial state:")
    sink.emit(f"Bob: {bob}")
    sink.emit(f"Karen: {karen}")
    result.snapshots["bob_before"] = ActorSnapshot.of(bob)
    result.snapshots["karen_before"] = ActorSnapshot.of(karen)

    sink.emit("")
    sink.emit("Modifying Karen's weapon damage to 30...")
    karen.weapon.set_power(30)
    sink.emit(f"Bob's weapon: {bob.weapon}")
    sink.emit(f"Karen's weapon: {karen.weapon}")
    sink.emit("SUCCESS: Bob's weapon remains unchanged!")
    sink.emit(f"Are weapons the same object? {bob.weapon is karen.weapon}")

    sink.emit("")
    sink.emit("Moving Karen...")
    karen.move(10, 10)
    sink.emit(f"Bob position: ({bob.x}, {bob.y})")
    sink.emit(f"Karen position: ({karen.x}, {karen.y})")

    sink.emit("")
    sink.emit("Adding new secondary attack to Karen...")
    karen.add_secondary_attack(AttackDescriptor("Spit", 5, 2))
    sink.emit(f"Bob's secondary attacks: {len(bob.secondary_attacks)}")
    sink.emit(f"Karen's secondary attacks: {len(karen.secondary_attacks)}")

    result.observations["same_weapon"] = bob.weapon is karen.weapon
    result.observations["same_attacks"] = bob.secondary_attacks is karen.secondary_attacks
    result.observations["original_weapon_kept"] = bob.weapon.power == 15
    result.observations["original_position_kept"] = bob.position == (5, 5)
    result.observations["original_attacks_kept"] = len(bob.secondary_attacks) == 2

    if settings.run_combat:
        sink.emit("")
        sink.emit("=== COMBAT SIMULATION ===")
        bob.attack(karen)
        karen.attack(bob)

    result.snapshots["bob_after"] = ActorSnapshot.of(bob)
    result.snapshots["karen_after"] = ActorSnapshot.of(karen)
    return result
