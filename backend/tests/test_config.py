"""Tests for Settings parsing."""

from pathlib import Path

from app.config import Settings


def test_postgres_url_uses_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/files")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/files"
    assert not s.is_sqlite


def test_relative_sqlite_path_resolved():
    s = Settings(database_url="sqlite+aiosqlite:///./data/test.db")
    path = s.database_url.removeprefix("sqlite+aiosqlite:///")
    assert Path(path).is_absolute()
    assert path.endswith("test.db")


def test_memory_sqlite_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"
    assert s.is_sqlite


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("FILES_API_REDIS_URL", "redis://cache:6379/2")
    monkeypatch.setenv("FILES_API_API_PREFIX", "/api/")
    s = Settings()
    assert s.redis_url == "redis://cache:6379/2"
    assert s.api_prefix == "/api"
