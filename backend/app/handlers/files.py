"""File handlers — list, fetch, create, update and delete file metadata.

Every handler receives the request-scoped session and cache client, issues a
single statement and reports the result as an outcome. Presence is decided
only by zero vs. non-zero returned/affected rows. The cache client is accepted
so its lifetime matches the request, but nothing is read from or written to it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import status
from redis.asyncio import Redis
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.responses import Empty, NotFound, Ok, Outcome, ServerError
from app.models.file import File
from app.schemas.files import FileCreate, FileDetail, FileSummary, FileUpdate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # Stored as naive UTC so the same value fits SQLite and TIMESTAMP WITHOUT TIME ZONE
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def _store_failure(db: AsyncSession, operation: str, exc: SQLAlchemyError) -> ServerError:
    logger.error("File %s failed: %s", operation, exc)
    try:
        await db.rollback()
    except SQLAlchemyError as rollback_exc:
        # The client still gets the original store error
        logger.warning("Rollback after failed file %s also failed: %s", operation, rollback_exc)
    return ServerError(str(exc))


async def list_files(db: AsyncSession, cache: Redis) -> Outcome:
    """All files, partial projection, in store order."""
    try:
        result = await db.execute(select(File.id, File.name))
        rows = result.all()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "list", exc)

    return Ok([FileSummary(id=row.id, name=row.name) for row in rows])


async def get_file_by_id(db: AsyncSession, cache: Redis, file_id: int) -> Outcome:
    try:
        result = await db.execute(select(File).where(File.id == file_id))
        file = result.scalars().first()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "get by id", exc)

    if file is None:
        logger.debug("File id=%s not found", file_id)
        return NotFound()
    return Ok(FileDetail.model_validate(file))


async def get_file_by_name(db: AsyncSession, cache: Redis, name: str) -> Outcome:
    """First file whose name matches exactly; names are not unique."""
    try:
        result = await db.execute(select(File).where(File.name == name).limit(1))
        file = result.scalars().first()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "get by name", exc)

    if file is None:
        logger.debug("File name=%r not found", name)
        return NotFound()
    return Ok(FileDetail.model_validate(file))


async def create_file(db: AsyncSession, cache: Redis, body: FileCreate) -> Outcome:
    now = _utcnow()
    try:
        result = await db.execute(
            insert(File)
            .values(name=body.name, created_at=now, updated_at=now)
            .returning(File.id)
        )
        inserted = result.scalars().all()
        await db.commit()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "create", exc)

    if not inserted:
        # A successful INSERT always reports its row; treat silence as a server fault
        logger.error("File create reported zero inserted rows for name=%r", body.name)
        return ServerError()

    logger.info("Created file id=%s", inserted[0])
    return Empty(status_code=status.HTTP_201_CREATED, resource_id=inserted[0])


async def update_file(db: AsyncSession, cache: Redis, file_id: int, body: FileUpdate) -> Outcome:
    """Rename a file and refresh ``updated_at``; ``created_at`` is untouched."""
    now = _utcnow()
    try:
        result = await db.execute(
            update(File)
            .where(File.id == file_id)
            .values(name=body.name, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        affected = result.rowcount
        await db.commit()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "update", exc)

    if not affected:
        logger.debug("File id=%s not found for update", file_id)
        return NotFound()
    return Empty()


async def delete_file(db: AsyncSession, cache: Redis, file_id: int) -> Outcome:
    """Hard delete; the returned rows are the only found/not-found signal."""
    try:
        result = await db.execute(
            delete(File)
            .where(File.id == file_id)
            .returning(File.id, File.name, File.created_at, File.updated_at)
            .execution_options(synchronize_session=False)
        )
        deleted = result.all()
        await db.commit()
    except SQLAlchemyError as exc:
        return await _store_failure(db, "delete", exc)

    if not deleted:
        logger.debug("File id=%s not found for delete", file_id)
        return NotFound()

    logger.info("Deleted file id=%s", file_id)
    return Empty()
