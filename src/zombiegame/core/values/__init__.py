"""Value types: weapons and secondary attacks."""

from zombiegame.core.values.models import AttackDescriptor, Weapon, non_negative, positive

__all__ = [
    "AttackDescriptor",
    "Weapon",
    "positive",
    "non_negative",
]
