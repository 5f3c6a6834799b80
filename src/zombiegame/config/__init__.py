"""Configuration module using Pydantic Settings.

Usage:
    from zombiegame.config import DemoSettings

    settings = DemoSettings(rule_width=60)
"""

from zombiegame.config.settings import DemoSettings, LogLevel

__all__ = [
    "DemoSettings",
    "LogLevel",
]
