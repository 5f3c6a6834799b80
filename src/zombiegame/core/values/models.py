"""Leaf value types owned by an Actor.

Both types share the same mutation policy: numeric fields that matter for combat are
validated on assignment, and an invalid value is ignored rather than raised. The
setter reports whether the value was accepted.

Usage:
    bite = Weapon("Bite", power=15, reach=1)
    bite.set_power(-3)   # False, power stays 15
    bite.power = 30      # accepted

    arm = AttackDescriptor("Arm", power=20, cooldown=5)
    spare = arm.copy()   # equal, but not the same object
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Self

logger = logging.getLogger(__name__)


def positive(value: int) -> bool:
    """Accept strictly positive values."""
    return value > 0


def non_negative(value: int) -> bool:
    """Accept zero and positive values."""
    return value >= 0


def _assign_checked(
    instance: object, attr: str, value: int, accept: Callable[[int], bool]
) -> bool:
    """Store value on instance if accept(value) holds, otherwise keep the prior value.

    Args:
        instance: Object being mutated.
        attr: Slot name to write.
        value: Candidate value.
        accept: Predicate deciding whether the value is valid.

    Returns:
        True if the value was stored, False if it was ignored.
    """
    if not accept(value):
        logger.debug(
            "Ignoring %s=%r on %s, keeping %r",
            attr.lstrip("_"),
            value,
            type(instance).__name__,
            getattr(instance, attr),
        )
        return False
    setattr(instance, attr, value)
    return True


class AttackDescriptor:
    """A secondary attack (a "Throw"): what is thrown, how hard, how often.

    Attributes:
        label: Name of the projectile.
        power: Damage dealt. Mutations must be > 0.
        cooldown: Seconds between uses. Mutations must be >= 0.
    """

    __slots__ = ("label", "_power", "_cooldown")

    def __init__(self, label: str, power: int, cooldown: int) -> None:
        self.label = label
        self._power = power
        self._cooldown = cooldown

    @property
    def power(self) -> int:
        return self._power

    @power.setter
    def power(self, value: int) -> None:
        self.set_power(value)

    @property
    def cooldown(self) -> int:
        return self._cooldown

    @cooldown.setter
    def cooldown(self, value: int) -> None:
        self.set_cooldown(value)

    def set_power(self, value: int) -> bool:
        """Set power if positive. Returns False and keeps the old value otherwise."""
        return _assign_checked(self, "_power", value, positive)

    def set_cooldown(self, value: int) -> bool:
        """Set cooldown if non-negative. Returns False and keeps the old value otherwise."""
        return _assign_checked(self, "_cooldown", value, non_negative)

    def copy(self) -> Self:
        """Return an independent instance with identical field values."""
        return type(self)(self.label, self._power, self._cooldown)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttackDescriptor):
            return NotImplemented
        return (self.label, self._power, self._cooldown) == (
            other.label,
            other._power,
            other._cooldown,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AttackDescriptor(label={self.label!r}, power={self._power}, "
            f"cooldown={self._cooldown})"
        )

    def __str__(self) -> str:
        return f"Throw[{self.label}, damage={self._power}, cooldown={self._cooldown}s]"


class Weapon:
    """Primary weapon of an Actor.

    Attributes:
        kind: Weapon type, e.g. "Bite".
        power: Damage per hit. Mutations must be > 0.
        reach: Range in tiles. Mutations must be > 0.
    """

    __slots__ = ("kind", "_power", "_reach")

    def __init__(self, kind: str, power: int, reach: int) -> None:
        self.kind = kind
        self._power = power
        self._reach = reach

    @property
    def power(self) -> int:
        return self._power

    @power.setter
    def power(self, value: int) -> None:
        self.set_power(value)

    @property
    def reach(self) -> int:
        return self._reach

    @reach.setter
    def reach(self, value: int) -> None:
        self.set_reach(value)

    def set_power(self, value: int) -> bool:
        """Set power if positive. Returns False and keeps the old value otherwise."""
        return _assign_checked(self, "_power", value, positive)

    def set_reach(self, value: int) -> bool:
        """Set reach if positive. Returns False and keeps the old value otherwise."""
        return _assign_checked(self, "_reach", value, positive)

    def copy(self) -> Self:
        """Return an independent instance with identical field values."""
        return type(self)(self.kind, self._power, self._reach)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weapon):
            return NotImplemented
        return (self.kind, self._power, self._reach) == (
            other.kind,
            other._power,
            other._reach,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Weapon(kind={self.kind!r}, power={self._power}, reach={self._reach})"

    def __str__(self) -> str:
        return f"Weapon[{self.kind}, damage={self._power}, range={self._reach}]"
