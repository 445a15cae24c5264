"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Gameplay constants are fixed in code; only the loop cadence, logging and
the high score location are configurable.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HIGHSCORE_FILENAME = ".tflap_highscore"


def default_highscore_path() -> Path | None:
    """High score file under the user's home, or None if HOME is unset."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / HIGHSCORE_FILENAME


class LoopSettings(BaseSettings):
    """Loop driver cadence."""

    model_config = SettingsConfigDict(env_prefix="TFLAP_LOOP_", extra="ignore")

    # Seconds between simulation ticks
    tick_rate: float = Field(default=0.05, gt=0.0)

    # Seconds slept at the end of every loop iteration
    sleep: float = Field(default=0.005, ge=0.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TFLAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_file: Path | None = None

    # Paths
    highscore_path: Path | None = Field(default_factory=default_highscore_path)

    # Nested settings
    loop: LoopSettings = Field(default_factory=LoopSettings)

    @property
    def persistence_enabled(self) -> bool:
        """Check if the high score survives the process."""
        return self.highscore_path is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
