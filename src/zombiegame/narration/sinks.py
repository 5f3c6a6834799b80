"""Narration sink implementations."""

from __future__ import annotations

import sys
from typing import TextIO


class StreamSink:
    """Write each line to a text stream, stdout by default.

    The stream is looked up at emit time when none was given, so redirected or
    captured stdout is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")


class RecordingSink:
    """Keep every line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

    @property
    def text(self) -> str:
        """All recorded lines joined with newlines."""
        return "\n".join(self.lines)


class NullSink:
    """Discard everything."""

    def emit(self, line: str) -> None:
        pass
