"""File metadata routes — dispatch to the file handlers and render outcomes."""

from fastapi import APIRouter, Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.responses import render
from app.cache import get_cache
from app.database import get_db
from app.handlers import files as handlers
from app.schemas.files import FileCreate, FileDetail, FileSummary, FileUpdate

router = APIRouter()


@router.get("", response_model=list[FileSummary])
async def list_files(db: AsyncSession = Depends(get_db), cache: Redis = Depends(get_cache)):
    """List all files (id and name only)."""
    return render(await handlers.list_files(db, cache))


@router.get("/name/{name}", response_model=FileDetail)
async def get_file_by_name(
    name: str,
    db: AsyncSession = Depends(get_db),
    cache: Redis = Depends(get_cache),
):
    """Fetch the first file with an exactly matching name."""
    return render(await handlers.get_file_by_name(db, cache, name))


@router.get("/{file_id}", response_model=FileDetail)
async def get_file_by_id(
    file_id: int,
    db: AsyncSession = Depends(get_db),
    cache: Redis = Depends(get_cache),
):
    """Fetch one file by id."""
    return render(await handlers.get_file_by_id(db, cache, file_id))


@router.post("", status_code=201)
async def create_file(
    body: FileCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
    cache: Redis = Depends(get_cache),
):
    """Create a file; the new record's URL is returned in ``Location``."""
    outcome = await handlers.create_file(db, cache, body)
    return render(
        outcome,
        location_for=lambda file_id: request.url_for("get_file_by_id", file_id=file_id).path,
    )


@router.put("/{file_id}")
async def update_file(
    file_id: int,
    body: FileUpdate,
    db: AsyncSession = Depends(get_db),
    cache: Redis = Depends(get_cache),
):
    """Rename a file."""
    return render(await handlers.update_file(db, cache, file_id, body))


@router.delete("/{file_id}")
async def delete_file(
    file_id: int,
    db: AsyncSession = Depends(get_db),
    cache: Redis = Depends(get_cache),
):
    """Delete a file."""
    return render(await handlers.delete_file(db, cache, file_id))
