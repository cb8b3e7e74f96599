"""Tests for handle construction — engine, session dependency, cache client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
import redis.asyncio as redis
from sqlalchemy import inspect

from app.cache import create_cache_pool, get_cache
from app.database import create_engine, create_session_factory, get_db, init_db


def _request(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


@pytest.mark.asyncio
async def test_init_db_creates_files_table(settings):
    engine = create_engine(settings)
    try:
        await init_db(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert "files" in tables
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_get_db_yields_session_from_factory(settings):
    engine = create_engine(settings)
    try:
        request = _request(session_factory=create_session_factory(engine))
        gen = get_db(request)
        session = await gen.__anext__()
        assert session.bind is engine
        await gen.aclose()
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_get_cache_releases_client(settings):
    pool = create_cache_pool(settings)
    gen = get_cache(_request(cache_pool=pool))
    client = await gen.__anext__()
    assert isinstance(client, redis.Redis)
    assert client.connection_pool is pool

    with patch.object(client, "aclose", AsyncMock()) as mock_close:
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()
    mock_close.assert_awaited_once()
    await pool.disconnect()


@pytest.mark.asyncio
async def test_lifespan_wires_handles(settings):
    from app.main import create_app

    app = create_app(settings)
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.cache_pool, redis.ConnectionPool)
        async with app.state.session_factory() as session:
            assert session.bind is app.state.engine
