"""
Configuration management for Garden Defense.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import STARTING_BALANCE, WAVES_TOTAL


class GameSettings(BaseSettings):
    """Session settings loaded from GARDEN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Economy
    starting_balance: int = Field(
        default=STARTING_BALANCE,
        ge=0,
        description="Sun available at the start and after every reset"
    )

    # Waves
    waves_total: int = Field(
        default=WAVES_TOTAL,
        ge=1,
        description="Number of waves to survive for a win"
    )
    auto_next_wave: bool = Field(
        default=False,
        description="Start the next wave as soon as one is cleared"
    )

    # Simulation
    seed: Optional[int] = Field(
        default=None,
        description="Seed for lanes, spawn jitter and sun drops. None means random"
    )
    max_step: float = Field(
        default=0.05,
        gt=0,
        description="Longest simulated step in seconds; larger frames are sub-stepped"
    )

    # Host
    fps: int = Field(default=60, ge=1)
    log_level: str = Field(
        default="INFO",
        description="Root logging level for the pygame host"
    )


@lru_cache()
def get_settings() -> GameSettings:
    """
    Get cached settings instance.
    Tests should build GameSettings(...) directly instead.
    """
    return GameSettings()
