"""Command-line entry point: run the three demonstrations in order.

Usage:
    $ zombiegame
    $ python -m zombiegame
"""

from __future__ import annotations

import logging

from zombiegame.config import DemoSettings
from zombiegame.demo.scenarios import (
    DemoResult,
    demonstrate_alias,
    demonstrate_deep_copy,
    demonstrate_shallow_copy,
)
from zombiegame.narration import NarrationSink, StreamSink
from zombiegame.utils import setup_logging

logger = logging.getLogger(__name__)

BANNER = "=== ZOMBIE GAME - Copy Demo ==="

DEMONSTRATIONS = (
    demonstrate_alias,
    demonstrate_shallow_copy,
    demonstrate_deep_copy,
)


def run_demonstrations(
    sink: NarrationSink, settings: DemoSettings | None = None
) -> list[DemoResult]:
    """Run alias, shallow and deep demonstrations in that order.

    Args:
        sink: Where narration goes.
        settings: Layout and behaviour options. Defaults to DemoSettings().

    Returns:
        One DemoResult per demonstration, in run order.
    """
    settings = settings or DemoSettings()
    sink.emit(BANNER)
    sink.emit("")
    results: list[DemoResult] = []
    for index, demonstration in enumerate(DEMONSTRATIONS):
        if index:
            sink.emit("")
            sink.emit("=" * settings.rule_width)
            sink.emit("")
        results.append(demonstration(sink, settings))
    logger.info("Ran %d demonstrations", len(results))
    return results


def main() -> int:
    """Run every demonstration, narrating to stdout.

    Takes no arguments. Configuration comes from ZOMBIEGAME_* environment variables.

    Returns:
        Process exit code (always 0).
    """
    settings = DemoSettings()
    setup_logging(settings.log_level)
    run_demonstrations(StreamSink(), settings)
    return 0
