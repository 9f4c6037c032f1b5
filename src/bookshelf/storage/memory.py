"""In-memory repository."""

from __future__ import annotations

from collections.abc import Sequence

from ..core import Context, ensure_context
from ..exceptions import BookNotFoundError
from ..models import Book


class MemoryRepository:
    """In-memory repository. Good for tests and short-lived scripts.

    Mirrors ``JsonFileRepository`` semantics, including duplicate IDs and
    first-match lookups. Books are copied in and out.
    """

    def __init__(self, books: Sequence[Book] | None = None) -> None:
        self._books: list[Book] = [book.model_copy() for book in books or []]

    def create(self, book: Book, *, ctx: Context | None = None) -> Book:
        ensure_context(ctx).raise_if_cancelled()
        self._books.append(book.model_copy())
        return book

    def get_all(self, *, ctx: Context | None = None) -> list[Book]:
        ensure_context(ctx).raise_if_cancelled()
        return [book.model_copy() for book in self._books]

    def save_all(self, books: Sequence[Book], *, ctx: Context | None = None) -> None:
        ensure_context(ctx).raise_if_cancelled()
        self._books = [book.model_copy() for book in books]

    def get_by_id(self, book_id: str, *, ctx: Context | None = None) -> Book | None:
        ensure_context(ctx).raise_if_cancelled()
        for book in self._books:
            if book.id == book_id:
                return book.model_copy()
        return None

    def update(self, book: Book, *, ctx: Context | None = None) -> None:
        ensure_context(ctx).raise_if_cancelled()
        for index, existing in enumerate(self._books):
            if existing.id == book.id:
                self._books[index] = book.model_copy()
                return
        raise BookNotFoundError(book.id)

    def delete(self, book_id: str, *, ctx: Context | None = None) -> None:
        ensure_context(ctx).raise_if_cancelled()
        remaining = [book for book in self._books if book.id != book_id]
        if len(remaining) == len(self._books):
            raise BookNotFoundError(book_id, f"failed to delete the book with id: {book_id}")
        self._books = remaining
