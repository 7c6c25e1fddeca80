"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import bookmarks, health
from core.config import get_settings
from core.errors import BookmarkNotFoundError
from core.logging_config import setup_logging
from db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    setup_logging(get_settings().log_level)
    logger.info("Bookmarks API starting")

    yield

    await engine.dispose()
    logger.info("Bookmarks API stopped")


# Path parameters as they appear in the public route templates
PATH_PARAM_NAMES = {"bookmark_id": "id"}


def _error_field(loc: Sequence[Any]) -> str:
    """
    Name the offending field from a pydantic error location.

    ("body", "title") -> "title"; ("path", "bookmark_id") -> "id";
    ("body", 17) (malformed JSON) -> "body".
    """
    names = [part for part in loc[1:] if isinstance(part, str)]
    if names and loc[0] == "path":
        return PATH_PARAM_NAMES.get(names[-1], names[-1])
    if names:
        return ".".join(names)
    return str(loc[0]) if loc else "request"


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="A minimal bookmark management service.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(BookmarkNotFoundError)
async def bookmark_not_found_handler(
    _request: Request, exc: BookmarkNotFoundError,
) -> JSONResponse:
    """Translate a missing bookmark into a 404 with a message body."""
    return JSONResponse(status_code=404, content={"message": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report invalid payloads and path parameters as 400 with per-field messages."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_error_field(error.get("loc", ())), error.get("msg", "Invalid value"))

    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": errors},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
