"""Utilities."""

from zombiegame.utils.logger_config import LevelTagFormatter, setup_logging

__all__ = [
    "LevelTagFormatter",
    "setup_logging",
]
