"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url always names the async aiosqlite driver

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults match the firmware's development credentials (admin/password) and
      work out of the box with a local SQLite file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./maze_alarm.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_sqlite_driver(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Basic authentication
    api_username: str = "admin"
    api_password: str = "password"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
