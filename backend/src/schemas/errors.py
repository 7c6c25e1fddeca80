"""Pydantic schemas for error response bodies."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of 404 responses."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Body of 400 responses: one message per offending field."""

    message: str
    errors: dict[str, str]
