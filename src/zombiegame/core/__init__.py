"""Core functionality: value types, the Actor and its copy operations.

Architecture Note:
    core/ holds the object graph and the rules for copying it. It never writes to
    the console; anything human-readable goes through a NarrationSink. For the
    scripted walkthroughs that print, see demo/.
"""

from zombiegame.core.actor import (
    Actor,
    SharingReport,
    Shared,
    bind_alias,
    deep_copy,
    default_weapon,
    shallow_copy,
    sharing_report,
)
from zombiegame.core.types import Alias, Copy
from zombiegame.core.values import AttackDescriptor, Weapon

__all__ = [
    # Types
    "Copy",
    "Alias",
    # Values
    "AttackDescriptor",
    "Weapon",
    # Actor
    "Actor",
    "default_weapon",
    "Shared",
    "bind_alias",
    "shallow_copy",
    "deep_copy",
    "sharing_report",
    "SharingReport",
]
