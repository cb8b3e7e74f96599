"""Files API configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SQLITE_PREFIX = "sqlite+aiosqlite:///"


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Files API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = ""

    # Relational store
    database_url: str = f"{_SQLITE_PREFIX}./data/files.db"
    db_pool_size: int = 5
    db_max_overflow: int = 0

    # Cache (connection is acquired per request, never used)
    redis_url: str = "redis://localhost:6379/0"
    redis_max_connections: int = 10

    uvicorn_workers: int = 1

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="FILES_API_",
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, value: str) -> str:
        """Plain postgresql:// URLs need the asyncpg driver."""
        if isinstance(value, str) and value.startswith("postgresql://"):
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator("api_prefix")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure a file-backed SQLite path is absolute."""
        if self.database_url.startswith(_SQLITE_PREFIX):
            raw = self.database_url[len(_SQLITE_PREFIX):]
            if raw and raw != ":memory:" and not Path(raw).is_absolute():
                base = Path(__file__).resolve().parent.parent  # backend/
                self.database_url = f"{_SQLITE_PREFIX}{base / raw}"
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
