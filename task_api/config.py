"""Application settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, read from TASK_API_* environment variables and .env."""

    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    log_level: str = "INFO"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="TASK_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
