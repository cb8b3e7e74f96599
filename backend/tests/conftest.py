"""Test fixtures — in-memory SQLite database, stub cache and FastAPI test client."""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.cache import get_cache
from app.config import Settings
from app.database import get_db
from app.main import create_app
from app.models.base import Base


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:", redis_url="redis://localhost:6379/15")


@pytest_asyncio.fixture
async def session_factory():
    """Shared factory over one in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Provide an async session for direct store access in tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def cache():
    """Stand-in for the Redis client; handlers must leave it untouched."""
    return MagicMock(name="redis")


@pytest_asyncio.fixture
async def client(settings, session_factory, cache):
    """Async test client; each request gets its own session, as in production."""
    app = create_app(settings)

    async def _override_db():
        async with session_factory() as session:
            yield session

    async def _override_cache():
        yield cache

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_cache] = _override_cache

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
