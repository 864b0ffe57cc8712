"""Measurement configuration via Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Top of the head sits above the head joint; empirical, in meters.
HEAD_DIVERGENCE = 0.1


class HeightSettings(BaseSettings):
    """Height estimation parameters."""

    model_config = SettingsConfigDict(
        env_prefix="HEIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    head_divergence: float = Field(default=HEAD_DIVERGENCE, ge=0.0)
    tie_break: Literal["left", "right"] = "right"


class AngleSettings(BaseSettings):
    """Angle measurement parameters."""

    model_config = SettingsConfigDict(
        env_prefix="ANGLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    decimals: int = Field(default=2, ge=0)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    file: str | None = None


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    height: HeightSettings = Field(default_factory=HeightSettings)
    angle: AngleSettings = Field(default_factory=AngleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
