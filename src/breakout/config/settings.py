"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Simulation parameters. Unset sizes fall back to canvas-relative defaults."""

    model_config = SettingsConfigDict(env_prefix="BREAKOUT_ENGINE_", extra="ignore")

    canvas_width: float = Field(default=400.0, gt=0)
    canvas_height: float = Field(default=600.0, gt=0)

    # None -> canvas_width / 40, canvas_width / 4, canvas_height / 20
    ball_radius: PositiveFloat | None = None
    paddle_width: PositiveFloat | None = None
    paddle_height: PositiveFloat | None = None

    columns: int = Field(default=4, ge=1)
    rows: int = Field(default=4, ge=1)
    lives: int = Field(default=5, ge=1)


class SimulatorSettings(BaseSettings):
    """Desktop window settings."""

    model_config = SettingsConfigDict(env_prefix="BREAKOUT_SIM_", extra="ignore")

    title: str = "Breakout"
    scale: int = Field(default=1, ge=1)
    fps: int = Field(default=120, ge=1)
    autoplay: bool = False
    paddle_speed: float = Field(default=6.0, gt=0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BREAKOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False

    # Headless runs stop after this many ticks
    max_ticks: int = Field(default=100_000, ge=1)

    # Nested settings
    engine: EngineSettings = Field(default_factory=EngineSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)

    @property
    def is_headless(self) -> bool:
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
