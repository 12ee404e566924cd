"""Core configuration.

- Centralizes environment variables (pydantic-settings) outside the CLI.
- Shared by the CLI and the adapters that need it (random seed).
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings.

    Read from `PROTOCOLS_PLAYGROUND_*` environment variables, then from an
    optional `.env` in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCOLS_PLAYGROUND_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    random_seed: int | None = Field(
        default=None,
        description="Seed for the random generators; unset means the process-wide source.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    show_banner: bool = Field(
        default=False,
        description="Print the welcome banner before CLI commands.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level
