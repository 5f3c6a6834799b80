"""Root logger setup for the command-line entry point.

Usage:
    from zombiegame.utils import setup_logging

    setup_logging("DEBUG")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LevelTagFormatter(logging.Formatter):
    """Formatter that prefixes each record with a short bracketed level tag.

    Keeps diagnostics on stderr easy to tell apart from narration on stdout when
    both end up in one terminal.
    """

    LEVEL_TAGS = {
        logging.DEBUG: "[dbg]",
        logging.INFO: "[inf]",
        logging.WARNING: "[wrn]",
        logging.ERROR: "[err]",
        logging.CRITICAL: "[crt]",
    }

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        tag = self.LEVEL_TAGS.get(record.levelno, "")
        return f"{tag} {s}" if tag else s


def setup_logging(level: int | str = "WARNING", stream: TextIO | None = None) -> logging.Handler:
    """Configure the root logger with a single LevelTagFormatter handler.

    Call once at the application's entry point. Existing root handlers are removed
    to avoid duplicate output.

    Args:
        level: Root logger level, as a name or number.
        stream: Destination stream. Defaults to stderr.

    Returns:
        The installed handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(LevelTagFormatter(LOG_FORMAT))

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)
    return console_handler
