"""PassMeter settings, read from ``PASSMETER_*`` environment variables or ``.env``."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults shared by the CLI and the web app."""

    model_config = SettingsConfigDict(
        env_prefix="PASSMETER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_length: int = Field(
        default=16,
        description="Length used when none is requested.",
    )
    min_length: int = Field(
        default=4,
        ge=0,
        description="Shortest length the front ends will request.",
    )
    max_length: int = Field(
        default=64,
        ge=1,
        description="Longest length the front ends will request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @model_validator(mode="after")
    def _ordered_bounds(self) -> "Settings":
        if self.min_length > self.max_length:
            raise ValueError("min_length must not exceed max_length")
        if not self.min_length <= self.default_length <= self.max_length:
            raise ValueError("default_length must lie within [min_length, max_length]")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clamp_length(length: int, settings: Settings | None = None) -> int:
    """Clamp *length* into the configured ``[min_length, max_length]`` range."""
    settings = settings or get_settings()
    return max(settings.min_length, min(length, settings.max_length))
