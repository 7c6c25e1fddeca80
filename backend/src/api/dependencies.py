"""FastAPI dependencies for injection."""
from db.session import get_async_session

__all__ = [
    "get_async_session",
]
