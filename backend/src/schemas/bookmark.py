"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from models.bookmark import TITLE_MAX_LENGTH, URL_MAX_LENGTH

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "url": "Url is required",
}


class BookmarkPayload(BaseModel):
    """
    Title/URL pair accepted by create and update.

    Both fields are required and must be non-empty. Any other keys in the
    request body (e.g. a client-supplied createdAt) are ignored.
    """

    # Defaults are validated so that a missing key reports the same message as ""
    title: str = Field(default="", max_length=TITLE_MAX_LENGTH, validate_default=True)
    url: str = Field(default="", max_length=URL_MAX_LENGTH, validate_default=True)

    @field_validator("title", "url", mode="before")
    @classmethod
    def check_required(cls, v: Any, info: ValidationInfo) -> Any:
        """Reject missing, null, or empty values with a field-specific message."""
        if v is None or v == "":
            raise PydanticCustomError("required", REQUIRED_MESSAGES[info.field_name])
        return v


class BookmarkCreate(BookmarkPayload):
    """Schema for creating a new bookmark."""


class BookmarkUpdate(BookmarkPayload):
    """Schema for updating an existing bookmark (full overwrite of title and url)."""


class BookmarkInfo(BaseModel):
    """
    Read-only projection returned by GET /api/bookmarks/{id}.

    Built straight from a column subset query, never from a loaded entity.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    title: str
    url: str
    created_at: datetime


class BookmarkResponse(BookmarkInfo):
    """Full bookmark as returned by the list endpoint."""

    updated_at: datetime | None = None
