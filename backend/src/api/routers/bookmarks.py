"""Bookmark CRUD endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from core.errors import BookmarkNotFoundError
from models.bookmark import ID_MAX, ID_MIN, Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkInfo, BookmarkResponse, BookmarkUpdate
from schemas.errors import ErrorResponse, ValidationErrorResponse
from services import bookmark_service

router = APIRouter(prefix="/api/bookmarks", tags=["bookmarks"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {400: {"model": ValidationErrorResponse}}

BookmarkId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


async def _get_bookmark_or_raise(db: AsyncSession, bookmark_id: int) -> Bookmark:
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)
    return bookmark


@router.get("", response_model=list[BookmarkResponse])
@router.get("/", response_model=list[BookmarkResponse], include_in_schema=False)
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks, most recently created first."""
    bookmarks = await bookmark_service.list_bookmarks(db)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkInfo,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def get_bookmark(
    bookmark_id: BookmarkId,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkInfo:
    """Get a single bookmark by ID."""
    info = await bookmark_service.get_bookmark_info(db, bookmark_id)
    if info is None:
        raise BookmarkNotFoundError(bookmark_id)
    return info


@router.post("", status_code=201, responses=BAD_REQUEST_RESPONSE)
@router.post("/", status_code=201, include_in_schema=False)
async def create_bookmark(
    data: BookmarkCreate,
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """
    Create a new bookmark.

    Responds with an empty body and a Location header pointing at the new
    bookmark (e.g. /api/bookmarks/1).
    """
    bookmark = await bookmark_service.create_bookmark(db, data)
    location = request.app.url_path_for("get_bookmark", bookmark_id=bookmark.id)
    return Response(status_code=201, headers={"Location": str(location)})


@router.put(
    "/{bookmark_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_bookmark(
    bookmark_id: BookmarkId,
    data: BookmarkUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """Replace the title and url of a bookmark."""
    bookmark = await bookmark_service.update_bookmark(db, bookmark_id, data)
    if bookmark is None:
        raise BookmarkNotFoundError(bookmark_id)
    return Response(status_code=204)


@router.delete(
    "/{bookmark_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """Permanently delete a bookmark."""
    bookmark = await _get_bookmark_or_raise(db, bookmark_id)
    await bookmark_service.delete_bookmark(db, bookmark)
    return Response(status_code=204)
