"""Liveness routes. Configuration is reported, neither store nor cache is contacted."""

from fastapi import APIRouter, Request
from sqlalchemy.engine import make_url

from app import __version__
from app.schemas.system import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    settings = request.app.state.settings
    return HealthResponse(
        version=__version__,
        store=make_url(settings.database_url).get_backend_name(),
        cache_configured=bool(settings.redis_url),
    )


@router.get("/ping")
async def ping():
    return {"status": "ok"}
