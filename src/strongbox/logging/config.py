# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Configuration for strongbox logging.

Settings are environment driven, read from ``STRONGBOX_LOGGING_*`` variables.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels accepted by ``STRONGBOX_LOGGING_LEVEL``, in any case."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: object) -> LogLevel | None:
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None

    def to_stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]


class LoggingSettings(BaseSettings):
    """Handlers and format of the ``strongbox`` logger tree."""

    model_config = SettingsConfigDict(
        env_prefix="STRONGBOX_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = LogLevel.INFO
    # JSON lines instead of "message key=value" text
    json_format: bool = False
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = True
    # Also log to this file when set
    file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel(v)

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
