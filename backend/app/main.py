"""Files API FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from app import __version__
from app.cache import close_cache_pool, create_cache_pool
from app.config import Settings, get_settings
from app.database import create_engine, create_session_factory, init_db

logger = logging.getLogger(__name__)


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Noisy third-party loggers to WARNING
    for noisy in ("aiosqlite", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory — store and cache handles live on ``app.state``."""
    from app.api.routes import api_router

    settings = settings or get_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        # === STARTUP ===
        _setup_logging(settings)

        engine = create_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.cache_pool = create_cache_pool(settings)

        await init_db(engine)
        logger.info("%s v%s started — listening on %s:%s", settings.app_name, __version__, settings.host, settings.port)

        try:
            yield
        finally:
            # === SHUTDOWN ===
            await close_cache_pool(app.state.cache_pool)
            await engine.dispose()
            logger.info("%s shutting down", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.settings = settings

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


def run(**kwargs: Any) -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
