"""Scripted walkthroughs of alias, shallow copy and deep copy."""

from zombiegame.demo.runner import main, run_demonstrations
from zombiegame.demo.scenarios import (
    DemoResult,
    demonstrate_alias,
    demonstrate_deep_copy,
    demonstrate_shallow_copy,
    make_bob,
)

__all__ = [
    "DemoResult",
    "demonstrate_alias",
    "demonstrate_shallow_copy",
    "demonstrate_deep_copy",
    "make_bob",
    "run_demonstrations",
    "main",
]
