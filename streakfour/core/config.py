"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board and rules configuration."""

    model_config = SettingsConfigDict(env_prefix="GAME_")

    rows: int = Field(default=6, ge=1, description="Board row count")
    columns: int = Field(default=7, ge=1, description="Board column count")
    win_length: int = Field(default=4, ge=2, description="Streak length that wins a round")
    human_symbol: str = Field(default="R", min_length=1, max_length=1)
    ai_symbol: str = Field(default="Y", min_length=1, max_length=1)

    @model_validator(mode="after")
    def _distinct_symbols(self) -> "GameSettings":
        if self.human_symbol == self.ai_symbol:
            raise ValueError("human_symbol and ai_symbol must differ")
        return self


class AISettings(BaseSettings):
    """AI player configuration."""

    model_config = SettingsConfigDict(env_prefix="AI_")

    seed: int | None = Field(default=None, description="Seed for the random column picker")


class LogSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    ai: AISettings = Field(default_factory=AISettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
