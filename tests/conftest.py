"""Shared test fixtures."""

import logging
import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from zombiegame import Actor, AttackDescriptor, RecordingSink, Weapon
from zombiegame.utils import LevelTagFormatter


@pytest.fixture
def sink():
    """Fresh in-memory narration sink."""
    return RecordingSink()


@pytest.fixture
def bob(sink):
    """Bob from the demo: 100 HP, Bite/15/1, Arm and Rock throws, moved to (5, 5)."""
    actor = Actor("Bob", 100, Weapon("Bite", 15, 1), narrator=sink)
    actor.add_secondary_attack(AttackDescriptor("Arm", 20, 5))
    actor.add_secondary_attack(AttackDescriptor("Rock", 10, 3))
    actor.move(5, 5)
    sink.clear()
    return actor


@pytest.fixture
def restore_root_logging():
    """Drop handlers installed by setup_logging() and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, LevelTagFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ZOMBIEGAME_* variables so settings fall back to defaults."""
    for key in list(os.environ):
        if key.startswith("ZOMBIEGAME_"):
            monkeypatch.delenv(key)
    return monkeypatch
