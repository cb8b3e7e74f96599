"""SQLAlchemy ORM models for the Files API."""

from app.models.base import Base
from app.models.file import File

__all__ = [
    "Base",
    "File",
]
