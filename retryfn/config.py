"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict

from retryfn.delay import DEFAULT_DELAY

DEFAULT_MAX_ATTEMPTS = 5


class RetrySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    delay_seconds: float = Field(default=DEFAULT_DELAY, ge=0)
    timeout_seconds: PositiveFloat | None = Field(
        default=None,
        description="Per-attempt timeout; unset disables the timeout.",
    )
    cancel_on_timeout: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


@lru_cache
def get_settings() -> RetrySettings:
    """Return cached settings instance."""

    return RetrySettings()


__all__ = ["DEFAULT_MAX_ATTEMPTS", "RetrySettings", "get_settings"]
