"""Domain exceptions translated to HTTP responses by the app's exception handlers."""


class BookmarkNotFoundError(Exception):
    """Raised when a bookmark ID does not resolve to an existing record."""

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark not found with id: {bookmark_id}")
