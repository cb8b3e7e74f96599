"""Service status schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness plus which backends the service was configured with."""
    status: str = "ok"
    version: str
    service: str = "files-api"
    store: str
    cache_configured: bool
