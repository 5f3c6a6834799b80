"""Narration: where human-readable output goes, and the snapshots it reports.

Usage:
    from zombiegame.narration import RecordingSink, ActorSnapshot

    sink = RecordingSink()
    bob = Actor("Bob", 100, narrator=sink)
    print(ActorSnapshot.of(bob))
"""

from zombiegame.narration.models import ActorSnapshot, AttackSnapshot, WeaponSnapshot
from zombiegame.narration.protocol import NarrationSink
from zombiegame.narration.sinks import NullSink, RecordingSink, StreamSink

__all__ = [
    "NarrationSink",
    "StreamSink",
    "RecordingSink",
    "NullSink",
    "ActorSnapshot",
    "WeaponSnapshot",
    "AttackSnapshot",
]
