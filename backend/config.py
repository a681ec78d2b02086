"""
Application configuration using pydantic-settings.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from CHAIN_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="CHAIN_", env_file=".env", extra="ignore")

    # Biography lookup
    wikipedia_api_url: str = "https://en.wikipedia.org/w/api.php"
    user_agent:        str = "ContemporariesGame/0.1 (history chain game)"
    http_timeout:      float = 20.0
    thumbnail_size:    int = 440

    # Target selection
    target_attempts: int = 10

    # API
    cors_origins: list[str] = ["*"]
    log_level:    str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
