"""Configuration settings using Pydantic Settings.

Provides typed configuration for the demonstration runner with environment
variable support.

Usage:
    from zombiegame.config import DemoSettings

    # Load from environment variables (ZOMBIEGAME_*)
    settings = DemoSettings()

    # Or override with explicit values
    settings = DemoSettings(run_combat=False, log_level="DEBUG")
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseSettings):
    """Configuration for the copy-semantics demonstrations.

    Attributes:
        log_level: Root logger level (diagnostics go to stderr, narration to stdout).
        rule_width: Width of the "=" rule printed between demonstrations.
        heading_width: Width of the "-" underline below each demonstration title.
        run_combat: Finish the deep copy demonstration with a combat exchange.

    Environment Variables:
        ZOMBIEGAME_LOG_LEVEL
        ZOMBIEGAME_RULE_WIDTH
        ZOMBIEGAME_HEADING_WIDTH
        ZOMBIEGAME_RUN_COMBAT
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOMBIEGAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = "WARNING"
    rule_width: int = Field(default=50, ge=1)
    heading_width: int = Field(default=40, ge=1)
    run_combat: bool = True
