"""Actor functionality: the model, the Shared wrapper and the copy operations."""

from zombiegame.core.actor.models import (
    DEFAULT_WEAPON_KIND,
    DEFAULT_WEAPON_POWER,
    DEFAULT_WEAPON_REACH,
    Actor,
    default_weapon,
)
from zombiegame.core.actor.operations import (
    SharingReport,
    bind_alias,
    deep_copy,
    shallow_copy,
    sharing_report,
)
from zombiegame.core.actor.wrapper import Shared, get_member, is_wrapped

__all__ = [
    # Models
    "Actor",
    "default_weapon",
    "DEFAULT_WEAPON_KIND",
    "DEFAULT_WEAPON_POWER",
    "DEFAULT_WEAPON_REACH",
    # Wrapper
    "Shared",
    "get_member",
    "is_wrapped",
    # Operations
    "bind_alias",
    "shallow_copy",
    "deep_copy",
    "sharing_report",
    "SharingReport",
]
