"""Repository abstractions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..core import Context
from ..models import Book


@runtime_checkable
class BookRepository(Protocol):
    """Protocol for persisting books.

    ``get_by_id`` reports absence with ``None``; ``update`` and ``delete``
    raise ``BookNotFoundError`` for an unknown ID.
    """

    def create(self, book: Book, *, ctx: Context | None = None) -> Book: ...
    def get_all(self, *, ctx: Context | None = None) -> list[Book]: ...
    def save_all(self, books: Sequence[Book], *, ctx: Context | None = None) -> None: ...
    def get_by_id(self, book_id: str, *, ctx: Context | None = None) -> Book | None: ...
    def update(self, book: Book, *, ctx: Context | None = None) -> None: ...
    def delete(self, book_id: str, *, ctx: Context | None = None) -> None: ...
