"""The Actor: a zombie that owns a weapon and a list of secondary attacks.

Usage:
    bob = Actor("Bob", 100, Weapon("Bite", 15, 1))
    bob.add_secondary_attack(AttackDescriptor("Arm", 20, 5))
    karen = bob.copy()           # deep copy, nothing shared
    karen.weapon.power = 30      # Bob still hits for 15
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from zombiegame.core.actor.wrapper import Shared, get_member, is_wrapped
from zombiegame.core.values import AttackDescriptor, Weapon
from zombiegame.narration.sinks import NullSink

if TYPE_CHECKING:
    from zombiegame.core.types import Copy
    from zombiegame.narration.protocol import NarrationSink

logger = logging.getLogger(__name__)

DEFAULT_WEAPON_KIND = "Bite"
DEFAULT_WEAPON_POWER = 10
DEFAULT_WEAPON_REACH = 1

WEAPON = "weapon"
SECONDARY_ATTACKS = "secondary_attacks"


def default_weapon() -> Weapon:
    """Build a fresh default weapon. Every call returns a new instance."""
    return Weapon(DEFAULT_WEAPON_KIND, DEFAULT_WEAPON_POWER, DEFAULT_WEAPON_REACH)


def _checked_attacks(attacks: list[Any]) -> list[AttackDescriptor]:
    """Return attacks unchanged after checking every element is an AttackDescriptor.

    Raises:
        TypeError: On the first element of another type.
    """
    for attack in attacks:
        if not isinstance(attack, AttackDescriptor):
            raise TypeError(f"Expected an AttackDescriptor, got {type(attack).__name__}")
    return attacks


class Actor:
    """A zombie with hit points, a position, a weapon and secondary attacks.

    The weapon and the attack list are owned: an Actor built normally, or through
    deep_copy(), never shares them with another Actor. Passing them wrapped in
    Shared(...) opts out of that, which is what shallow_copy() does.

    Args:
        name: Display name.
        health: Starting and maximum hit points.
        weapon: Weapon to own, taken as-is (no copy). A new default weapon
            ("Bite", 10, 1) is created when omitted. Shared(weapon) holds it
            by reference instead.
        secondary_attacks: Initial attacks. The elements are taken as-is into a new
            list. Shared(some_list) adopts that list object itself.
        narrator: Sink for narration lines. Defaults to a NullSink.

    Raises:
        TypeError: If weapon is not a Weapon, or an attack is not an AttackDescriptor.
    """

    __slots__ = (
        "name",
        "narrator",
        "_current_health",
        "_max_health",
        "_weapon",
        "_secondary_attacks",
        "_x",
        "_y",
        "_shared",
    )

    def __init__(
        self,
        name: str,
        health: int,
        weapon: Weapon | Shared[Weapon] | None = None,
        *,
        secondary_attacks: Iterable[AttackDescriptor] | Shared[list[AttackDescriptor]] | None = None,
        narrator: NarrationSink | None = None,
    ) -> None:
        self.name = name
        self.narrator: NarrationSink = narrator if narrator is not None else NullSink()
        self._current_health = health
        self._max_health = health
        self._shared: set[str] = set()
        self._weapon: Weapon = default_weapon()
        if weapon is not None:
            self.set_weapon(weapon)
        self._secondary_attacks: list[AttackDescriptor] = []
        if secondary_attacks is not None:
            if is_wrapped(secondary_attacks):
                self._secondary_attacks = _checked_attacks(get_member(secondary_attacks))
                self._shared.add(SECONDARY_ATTACKS)
            else:
                self._secondary_attacks = _checked_attacks(list(secondary_attacks))  # type: ignore[arg-type]
        self._x = 0
        self._y = 0

    # Health

    @property
    def current_health(self) -> int:
        return self._current_health

    @current_health.setter
    def current_health(self, value: int) -> None:
        self.set_health(value)

    @property
    def max_health(self) -> int:
        """Hit point ceiling, fixed at construction."""
        return self._max_health

    def set_health(self, value: int) -> bool:
        """Set current health if 0 <= value <= max_health.

        Returns:
            True if accepted, False if ignored (prior value kept).
        """
        if not 0 <= value <= self._max_health:
            logger.debug(
                "Ignoring health=%r for %s (allowed 0..%d)", value, self.name, self._max_health
            )
            return False
        self._current_health = value
        return True

    # Owned members

    @property
    def weapon(self) -> Weapon:
        return self._weapon

    @weapon.setter
    def weapon(self, value: Weapon | Shared[Weapon]) -> None:
        self.set_weapon(value)

    def set_weapon(self, weapon: Weapon | Shared[Weapon]) -> None:
        """Replace the weapon. A plain Weapon is owned, Shared(weapon) is held by reference.

        Raises:
            TypeError: If the (unwrapped) value is not a Weapon.
        """
        member = get_member(weapon)
        if not isinstance(member, Weapon):
            raise TypeError(f"Expected a Weapon, got {type(member).__name__}")
        self._weapon = member
        if is_wrapped(weapon):
            self._shared.add(WEAPON)
        else:
            self._shared.discard(WEAPON)

    @property
    def secondary_attacks(self) -> list[AttackDescriptor]:
        """The attack list itself, not a copy."""
        return self._secondary_attacks

    def add_secondary_attack(self, attack: AttackDescriptor) -> None:
        """Append an attack to the end of the list.

        Raises:
            TypeError: If attack is not an AttackDescriptor.
        """
        _checked_attacks([attack])
        self._secondary_attacks.append(attack)

    @property
    def shared_members(self) -> frozenset[str]:
        """Names of members held by reference rather than owned."""
        return frozenset(self._shared)

    # Position

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    def move(self, dx: int, dy: int) -> tuple[int, int]:
        """Shift position by (dx, dy). No bounds.

        Returns:
            The new (x, y) position.
        """
        self._x += dx
        self._y += dy
        self.narrator.emit(f"{self.name} moves to position ({self._x}, {self._y})")
        return self.position

    # Combat

    def attack(self, target: Actor) -> int:
        """Hit target with the current weapon.

        Args:
            target: Actor receiving the damage.

        Returns:
            Damage dealt (the weapon's power at the time of the attack).

        Raises:
            TypeError: If target is not an Actor.
        """
        if not isinstance(target, Actor):
            raise TypeError(f"Cannot attack {type(target).__name__}, expected Actor")
        damage = self._weapon.power
        self.narrator.emit(f"{self.name} attacks {target.name} with {self._weapon.kind}")
        target.take_damage(damage)
        return damage

    def take_damage(self, amount: int) -> int:
        """Subtract amount from current health, never going below zero.

        The upper bound is not re-checked here; nothing in the game heals.

        Returns:
            Current health after the hit.
        """
        self._current_health -= amount
        if self._current_health < 0:
            self._current_health = 0
        self.narrator.emit(
            f"{self.name} takes {amount} damage. HP: {self._current_health}/{self._max_health}"
        )
        return self._current_health

    # Copying

    def _own_attacks(self, attacks: list[AttackDescriptor]) -> None:
        """Replace the attack list with an already copied one, owned from now on."""
        self._secondary_attacks = _checked_attacks(attacks)
        self._shared.discard(SECONDARY_ATTACKS)

    def _take_primitives(self, source: Actor) -> None:
        """Overwrite name, health and position with source's values."""
        self.name = source.name
        self._current_health = source._current_health
        self._max_health = source._max_health
        self._x = source._x
        self._y = source._y

    def copy(self) -> Copy[Actor]:
        """Return a deep copy. See deep_copy()."""
        from zombiegame.core.actor.operations import deep_copy

        return deep_copy(self)

    def __copy__(self) -> Actor:
        from zombiegame.core.actor.operations import shallow_copy

        return shallow_copy(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Copy[Actor]:
        from zombiegame.core.actor.operations import deep_copy

        return deep_copy(self, memo)

    def __repr__(self) -> str:
        return (
            f"Actor(name={self.name!r}, health={self._current_health}/{self._max_health}, "
            f"position={self.position}, weapon={self._weapon!r}, "
            f"secondary_attacks={len(self._secondary_attacks)})"
        )

    def __str__(self) -> str:
        return (
            f"Zombie[name={self.name}, HP={self._current_health}/{self._max_health}, "
            f"position=({self._x},{self._y}), weapon={self._weapon}, "
            f"secondaryAttacks={len(self._secondary_attacks)}]"
        )
