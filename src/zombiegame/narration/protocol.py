"""Protocol for narration output.

Narration is the human-readable account of what actors do. It is kept behind a
one-method interface so the copy and combat logic never touches the console.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NarrationSink(Protocol):
    """Anything that accepts lines of narration.

    Implementations:
        - StreamSink: writes to stdout (or any text stream)
        - RecordingSink: keeps lines in memory (tests)
        - NullSink: discards everything (default for new actors)

    Usage:
        sink = RecordingSink()
        bob = Actor("Bob", 100, narrator=sink)
        bob.move(5, 5)
        assert sink.lines == ["Bob moves to position (5, 5)"]
    """

    def emit(self, line: str) -> None:
        """Accept one line of narration, without a trailing newline."""
        ...
