"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so that library-level knobs follow the 12-factor
convention of the services that embed rop:

  ROP_LOG_LEVEL     → log_level     (DEBUG, INFO, WARNING, ERROR, CRITICAL)
  ROP_LOG_FORMAT    → log_format    ("console" or "json")
  ROP_TRACE_STAGES  → trace_stages  (log Pipeline stages and caught faults at debug level)

Nothing here is read at import time; call get_settings() when needed.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraceSettings(BaseSettings):
    """
    The one setting read on hot paths (Pipeline runs, try_lift faults).

    Kept apart from RopSettings so a bad logging variable cannot make a
    pipeline fail before its first stage.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    trace_stages: bool = Field(
        default=False,
        description="Log each executed Pipeline stage and each caught fault at debug level",
    )


class RopSettings(TraceSettings):
    """
    Root settings for the rop package.

    Load order (highest priority first):
      1. Environment variables
      2. .env file in the working directory
      3. Default values
    """

    log_level: str = Field(default="INFO", description="Minimum level for rop log events")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Renderer used by configure_logging()",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard logging level name, case-insensitively."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    def level_number(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> RopSettings:
    """Load settings once; get_settings.cache_clear() forces a reload."""
    return RopSettings()


@lru_cache(maxsize=1)
def get_trace_settings() -> TraceSettings:
    """Load only the tracing flag; get_trace_settings.cache_clear() forces a reload."""
    return TraceSettings()


def trace_enabled() -> bool:
    """Whether ROP_TRACE_STAGES asks for stage and fault events."""
    return get_trace_settings().trace_stages
