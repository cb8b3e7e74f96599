"""File schemas — request bodies and the two read projections."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileSummary(BaseModel):
    """Partial projection used by listing."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class FileDetail(FileSummary):
    """Complete projection used by single-record retrieval."""
    created_at: datetime
    updated_at: datetime


class FileCreate(BaseModel):
    name: str


class FileUpdate(BaseModel):
    name: str
