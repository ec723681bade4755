"""Application settings and configuration."""

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.models.quote import GameMode

# Load .env file if present
load_dotenv()

DEFAULT_QUOTES_PATH = Path(__file__).resolve().parent.parent / "data" / "quotes.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Corpus
    quotes_path: Path = Field(
        default=DEFAULT_QUOTES_PATH,
        description="Path to the JSON quote corpus",
        validation_alias="QUOTES_PATH",
    )

    # Game Settings
    default_mode: GameMode = Field(
        default=GameMode.MC_EASY,
        description="Mode used when none is requested",
        validation_alias="DEFAULT_MODE",
    )

    default_rounds: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Rounds played by the CLI when not specified",
        validation_alias="DEFAULT_ROUNDS",
    )

    random_seed: int | None = Field(
        default=None,
        description="Seed for quote selection, for reproducible sessions",
        validation_alias="RANDOM_SEED",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for the game core",
        validation_alias="LOG_LEVEL",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one logging knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
