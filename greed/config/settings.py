"""
Greed - Application Settings

Loads configuration from environment variables (prefixed GREED_) and an
optional .env file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game session
    player_count: int = Field(default=2, ge=2)
    seed: int | None = None

    model_config = {
        "env_prefix": "GREED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
