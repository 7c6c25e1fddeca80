"""
Data access and CRUD operations for bookmarks.

Lookups return None (or False) for missing records instead of raising; the API
layer decides how absence is reported.

Note: Nothing here commits. The request-scoped session (db.session) commits at
request end and rolls back on error.
"""
import logging
from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkInfo, BookmarkUpdate

logger = logging.getLogger(__name__)


async def list_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks, newest first."""
    result = await db.execute(
        select(Bookmark).order_by(Bookmark.created_at.desc(), Bookmark.id.desc()),
    )
    return list(result.scalars().all())


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark by ID. Returns None if not found."""
    result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    return result.scalar_one_or_none()


async def get_bookmark_info(db: AsyncSession, bookmark_id: int) -> BookmarkInfo | None:
    """Get the id/title/url/created_at projection of a bookmark. Returns None if not found."""
    result = await db.execute(
        select(Bookmark.id, Bookmark.title, Bookmark.url, Bookmark.created_at)
        .where(Bookmark.id == bookmark_id),
    )
    row = result.one_or_none()
    if row is None:
        return None
    return BookmarkInfo.model_validate(row)


async def save_bookmark(db: AsyncSession, bookmark: Bookmark) -> Bookmark:
    """Insert or update a bookmark and return it with generated id/defaults loaded."""
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(db: AsyncSession, bookmark: Bookmark) -> None:
    """Hard-delete a loaded bookmark."""
    await db.delete(bookmark)
    await db.flush()
    logger.info("Deleted bookmark %s", bookmark.id)


async def delete_bookmark_by_id(db: AsyncSession, bookmark_id: int) -> bool:
    """Hard-delete a bookmark by ID. Returns True if a row was removed."""
    result = await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))
    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted bookmark %s", bookmark_id)
    return deleted


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """
    Create a new bookmark.

    created_at is always the server's current time; the payload has no say in it.
    """
    bookmark = Bookmark(
        title=data.title,
        url=data.url,
        created_at=datetime.now(UTC),
    )
    bookmark = await save_bookmark(db, bookmark)
    logger.info("Created bookmark %s", bookmark.id)
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark | None:
    """
    Overwrite title and url of a bookmark and stamp updated_at.

    id and created_at are never touched. Returns None if not found.
    """
    bookmark = await get_bookmark(db, bookmark_id)
    if bookmark is None:
        return None

    bookmark.title = data.title
    bookmark.url = data.url
    bookmark.updated_at = datetime.now(UTC)

    bookmark = await save_bookmark(db, bookmark)
    logger.info("Updated bookmark %s", bookmark_id)
    return bookmark
