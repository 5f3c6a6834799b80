"""Pure functions for the three ways of "copying" an Actor.

Each function has a different aliasing contract, and they are kept separate so
each can be exercised on its own:

    bind_alias(a)    -> a itself. Nothing is copied.
    shallow_copy(a)  -> new Actor, same weapon object, same attack list object.
    deep_copy(a)     -> new Actor, new weapon, new list of new attacks.

Only deep_copy() is safe for general use. The other two exist to show what goes
wrong without it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from zombiegame.core.actor.models import Actor
from zombiegame.core.actor.wrapper import Shared
from zombiegame.core.types import Alias, Copy

logger = logging.getLogger(__name__)


def _require_actor(value: Any, operation: str) -> Actor:
    if not isinstance(value, Actor):
        raise TypeError(f"{operation} expects an Actor, got {type(value).__name__}")
    return value


def bind_alias(actor: Actor) -> Alias[Actor]:
    """Bind a second name to the same Actor.

    Args:
        actor: Actor to alias.

    Returns:
        actor itself. Every mutation through the result is a mutation of actor.

    Raises:
        TypeError: If actor is not an Actor.
    """
    return _require_actor(actor, "bind_alias")


def shallow_copy(actor: Actor) -> Actor:
    """Create a new Actor that shares the source's weapon and attack list.

    Name, health and position are copied by value, so renaming or moving the copy
    leaves the source alone. The weapon and the attack list are the source's own
    objects: changing the copy's weapon power, or appending an attack through
    either actor, is visible through both.

    Args:
        actor: Source actor.

    Returns:
        New Actor whose shared_members are {"weapon", "secondary_attacks"}.

    Raises:
        TypeError: If actor is not an Actor.
    """
    source = _require_actor(actor, "shallow_copy")
    clone = Actor(
        source.name,
        source.max_health,
        Shared(source.weapon),
        secondary_attacks=Shared(source.secondary_attacks),
        narrator=source.narrator,
    )
    clone._take_primitives(source)
    logger.debug("Shallow copied %s (weapon and attacks shared)", source.name)
    return clone


def deep_copy(actor: Actor, memo: dict[int, Any] | None = None) -> Copy[Actor]:
    """Create a fully independent Actor.

    Primitives are copied by value, the weapon through Weapon.copy(), and the
    attack list is rebuilt element by element through AttackDescriptor.copy(),
    keeping order. The narration sink is a capability, not state, so the copy
    keeps using the same one.

    When called from copy.deepcopy(), memo maps id() of already copied objects to
    their copies. Members found there are reused, and new member copies are
    recorded, so objects reachable both through the actor and elsewhere in the
    copied structure stay one object.

    Args:
        actor: Source actor.
        memo: copy.deepcopy() memo dictionary, if any.

    Returns:
        New Actor with no storage in common with the source.

    Raises:
        TypeError: If actor is not an Actor.
    """
    source = _require_actor(actor, "deep_copy")
    if memo is None:
        memo = {}

    def _copied(member: Any) -> Any:
        if id(member) not in memo:
            memo[id(member)] = member.copy()
        return memo[id(member)]

    clone = Actor(
        source.name,
        source.max_health,
        _copied(source.weapon),
        secondary_attacks=[_copied(attack) for attack in source.secondary_attacks],
        narrator=source.narrator,
    )
    if id(source.secondary_attacks) in memo:
        clone._own_attacks(memo[id(source.secondary_attacks)])
    else:
        memo[id(source.secondary_attacks)] = clone.secondary_attacks
    clone._take_primitives(source)
    logger.debug(
        "Deep copied %s (%d secondary attacks)", source.name, len(clone.secondary_attacks)
    )
    return clone


@dataclass(slots=True, frozen=True)
class SharingReport:
    """What two actors have in common, by identity.

    Attributes:
        same_actor: Both names refer to one Actor.
        same_weapon: Both hold the same Weapon object.
        same_attacks: Both hold the same attack list object.
        shared_attack_elements: Number of AttackDescriptor objects present in both lists.
    """

    same_actor: bool
    same_weapon: bool
    same_attacks: bool
    shared_attack_elements: int

    @property
    def independent(self) -> bool:
        """True when nothing reachable from one actor is reachable from the other."""
        return not (
            self.same_actor
            or self.same_weapon
            or self.same_attacks
            or self.shared_attack_elements
        )


def sharing_report(first: Actor, second: Actor) -> SharingReport:
    """Compare two actors and their owned members by identity.

    Raises:
        TypeError: If either argument is not an Actor.
    """
    a = _require_actor(first, "sharing_report")
    b = _require_actor(second, "sharing_report")
    ids_b = {id(attack) for attack in b.secondary_attacks}
    return SharingReport(
        same_actor=a is b,
        same_weapon=a.weapon is b.weapon,
        same_attacks=a.secondary_attacks is b.secondary_attacks,
        shared_attack_elements=sum(1 for attack in a.secondary_attacks if id(attack) in ids_b),
    )
