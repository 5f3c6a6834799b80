"""State snapshots for narration and inspection.

A snapshot freezes an actor's observable state at one moment, so a demonstration
can report "before" and "after" without holding on to live objects that may be
mutated (or aliased) later.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zombiegame.core.actor.models import Actor
    from zombiegame.core.values.models import AttackDescriptor, Weapon


@dataclass(slots=True, frozen=True)
class WeaponSnapshot:
    """Field values of a Weapon at snapshot time."""

    kind: str
    power: int
    reach: int

    @classmethod
    def of(cls, weapon: Weapon) -> WeaponSnapshot:
        return cls(kind=weapon.kind, power=weapon.power, reach=weapon.reach)

    def __str__(self) -> str:
        return f"Weapon[{self.kind}, damage={self.power}, range={self.reach}]"


@dataclass(slots=True, frozen=True)
class AttackSnapshot:
    """Field values of an AttackDescriptor at snapshot time."""

    label: str
    power: int
    cooldown: int

    @classmethod
    def of(cls, attack: AttackDescriptor) -> AttackSnapshot:
        return cls(label=attack.label, power=attack.power, cooldown=attack.cooldown)

    def __str__(self) -> str:
        return f"Throw[{self.label}, damage={self.power}, cooldown={self.cooldown}s]"


@dataclass(slots=True, frozen=True)
class ActorSnapshot:
    """Observable state of an Actor at snapshot time.

    Attributes:
        name: Actor name.
        current_health: Hit points at snapshot time.
        max_health: Hit point ceiling.
        position: (x, y) position.
        weapon: Weapon field values.
        secondary_attacks: Attack field values, in order.
        weapon_id: id() of the weapon object, for identity comparisons.
        attacks_id: id() of the attack list object, for identity comparisons.

    Example:
        before = ActorSnapshot.of(bob)
        karen.weapon.power = 30
        after = ActorSnapshot.of(bob)
        assert before.weapon == after.weapon  # only holds if Karen is a deep copy
    """

    name: str
    current_health: int
    max_health: int
    position: tuple[int, int]
    weapon: WeaponSnapshot
    secondary_attacks: tuple[AttackSnapshot, ...]
    weapon_id: int
    attacks_id: int

    @classmethod
    def of(cls, actor: Actor) -> ActorSnapshot:
        return cls(
            name=actor.name,
            current_health=actor.current_health,
            max_health=actor.max_health,
            position=actor.position,
            weapon=WeaponSnapshot.of(actor.weapon),
            secondary_attacks=tuple(AttackSnapshot.of(a) for a in actor.secondary_attacks),
            weapon_id=id(actor.weapon),
            attacks_id=id(actor.secondary_attacks),
        )

    def __str__(self) -> str:
        x, y = self.position
        return (
            f"Zombie[name={self.name}, HP={self.current_health}/{self.max_health}, "
            f"position=({x},{y}), weapon={self.weapon}, "
            f"secondaryAttacks={len(self.secondary_attacks)}]"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary of builtins."""
        return {
            "name": self.name,
            "current_health": self.current_health,
            "max_health": self.max_health,
            "position": list(self.position),
            "weapon": {
                "kind": self.weapon.kind,
                "power": self.weapon.power,
                "reach": self.weapon.reach,
            },
            "secondary_attacks": [
                {"label": a.label, "power": a.power, "cooldown": a.cooldown}
                for a in self.secondary_attacks
            ],
            "weapon_id": self.weapon_id,
            "attacks_id": self.attacks_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ActorSnapshot:
        """Create from a dictionary produced by to_dict()."""
        x, y = data["position"]
        return cls(
            name=data["name"],
            current_health=data["current_health"],
            max_health=data["max_health"],
            position=(x, y),
            weapon=WeaponSnapshot(**data["weapon"]),
            secondary_attacks=tuple(AttackSnapshot(**a) for a in data.get("secondary_attacks", [])),
            weapon_id=data.get("weapon_id", 0),
            attacks_id=data.get("attacks_id", 0),
        )
