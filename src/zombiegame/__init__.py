"""zombiegame: alias vs shallow copy vs deep copy, shown on a zombie.

Usage:
    from zombiegame import Actor, AttackDescriptor, Weapon, deep_copy

    bob = Actor("Bob", 100, Weapon("Bite", 15, 1))
    bob.add_secondary_attack(AttackDescriptor("Arm", 20, 5))

    karen = deep_copy(bob)
    karen.weapon.power = 30
    assert bob.weapon.power == 15
"""

__version__ = "0.1.0"

# Core primitives
from zombiegame.core import (
    Actor,
    Alias,
    AttackDescriptor,
    Copy,
    Shared,
    SharingReport,
    Weapon,
    bind_alias,
    deep_copy,
    default_weapon,
    shallow_copy,
    sharing_report,
)

# Narration
from zombiegame.narration import (
    ActorSnapshot,
    NarrationSink,
    NullSink,
    RecordingSink,
    StreamSink,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Alias",
    "AttackDescriptor",
    "Weapon",
    "Actor",
    "default_weapon",
    "Shared",
    "bind_alias",
    "shallow_copy",
    "deep_copy",
    "sharing_report",
    "SharingReport",
    # Narration
    "NarrationSink",
    "StreamSink",
    "RecordingSink",
    "NullSink",
    "ActorSnapshot",
]
