"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

DEFAULT_CACHE_DIR = Path.home() / ".cache/crawlforge"


class Settings(BaseSettings):
    """Settings for crawlforge. Every field can be set as CRAWLFORGE_<NAME>."""

    model_config = SettingsConfigDict(
        env_prefix="CRAWLFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    forge: str = "github"
    request_timeout: float = 30.0
    user_agent: str = f"crawlforge/{__version__}"
    max_retries: int = 3
    cache_dir: Path = DEFAULT_CACHE_DIR
    cache_days: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
