"""Public exception types for bookshelf."""

from __future__ import annotations


class BookshelfError(Exception):
    """Base class for all bookshelf exceptions."""


class BookshelfLoadError(BookshelfError):
    """Raised when the book file cannot be read or parsed."""


class BookshelfSaveError(BookshelfError):
    """Raised when the book collection cannot be serialized or written."""


class BookNotFoundError(BookshelfError, LookupError):
    """Raised by update/delete when no book has the requested ID."""

    def __init__(self, book_id: str, message: str | None = None) -> None:
        self.book_id = book_id
        super().__init__(message or "book not found")


class OperationCancelledError(BookshelfError):
    """Raised when a repository call runs under a cancelled or expired context."""
