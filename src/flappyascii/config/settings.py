"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flappyascii.game.config import GameConfig


class GameSettings(BaseSettings):
    """Game constants; defaults match the classic tuning."""

    model_config = SettingsConfigDict(env_prefix="FLAPPY_GAME_", extra="ignore")

    screen_width: int = Field(default=90, ge=20, le=400)
    screen_height: int = Field(default=28, ge=16, le=200)
    gravity: float = Field(default=0.5, gt=0.0)
    flap_strength: float = Field(default=-1.5, lt=0.0)
    pipe_speed: float = Field(default=1.0, gt=0.0)
    pipe_frequency: int = Field(default=20, ge=1)
    pipe_gap_size: int = Field(default=5, ge=1)
    bird_x: int = Field(default=20, ge=0)

    @model_validator(mode="after")
    def check_bird_lane(self) -> "GameSettings":
        if self.bird_x >= self.screen_width:
            raise ValueError(
                f"bird_x {self.bird_x} must be inside a screen {self.screen_width} columns wide"
            )
        return self

    def to_config(self) -> GameConfig:
        """Build the immutable engine config."""
        return GameConfig(
            screen_width=self.screen_width,
            screen_height=self.screen_height,
            gravity=self.gravity,
            flap_strength=self.flap_strength,
            pipe_speed=self.pipe_speed,
            pipe_frequency=self.pipe_frequency,
            pipe_gap_size=self.pipe_gap_size,
            bird_x=self.bird_x,
        )


class DisplaySettings(BaseSettings):
    """Display-related settings."""

    model_config = SettingsConfigDict(env_prefix="FLAPPY_DISPLAY_", extra="ignore")

    # Minimum time between simulation ticks
    tick_ms: int = Field(default=100, ge=10)

    # Simulator window
    window_width: int = 1000
    window_height: int = 640
    font_size: int = Field(default=18, ge=6)
    fps: int = 60
    fullscreen: bool = False

    # Colors
    light_background: tuple[int, int, int] = (245, 245, 240)
    light_foreground: tuple[int, int, int] = (30, 30, 30)
    dark_background: tuple[int, int, int] = (18, 18, 24)
    dark_foreground: tuple[int, int, int] = (220, 220, 230)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLAPPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "terminal"] = "simulator"
    debug: bool = False

    # Theme
    theme: str = "light"

    # Paths
    high_score_path: Path = Field(
        default_factory=lambda: Path.home() / ".flappyascii" / "store.json"
    )
    log_file: Path = Path("flappyascii.log")

    # Fixed seed for reproducible obstacle placement
    seed: int | None = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running in the pygame simulator window."""
        return self.env == "simulator"

    @property
    def is_terminal(self) -> bool:
        """Check if running inside the terminal."""
        return self.env == "terminal"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
