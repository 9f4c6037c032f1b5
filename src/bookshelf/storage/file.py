"""File-based JSON repository."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from pathlib import Path

from ..core import Context, RepositoryConfig, ensure_context
from ..exceptions import BookNotFoundError, BookshelfLoadError, BookshelfSaveError
from ..models import Book
from ..serializers import books_from_json, books_to_json

logger = logging.getLogger(__name__)


class JsonFileRepository:
    """Keeps every book in one JSON array file.

    Every call re-reads the whole file and every mutation rewrites it. Writes
    go straight to the target path: no temp file, no rename, no locking.

    Error-handling contract
    ----------------------
    - A missing file reads as an empty collection.
    - Read and parse failures raise ``BookshelfLoadError``; serialize and
      write failures raise ``BookshelfSaveError``.
    - Failing to create the initial file, and (unless
      ``raise_on_create_save_error`` is set) failing to persist in
      ``create``, are reported with ``warnings.warn`` and not raised.
    """

    def __init__(self, path: str | Path, config: RepositoryConfig | None = None) -> None:
        self.path = Path(path)
        self.config = config or RepositoryConfig()
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        try:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding=self.config.encoding)
        except OSError as exc:
            logger.warning("could not initialize book file %s: %s", self.path, exc)
            warnings.warn(
                f"bookshelf: error creating book file {self.path}: {exc}",
                stacklevel=3,
            )
            return
        logger.debug("initialized empty book file %s", self.path)

    def create(self, book: Book, *, ctx: Context | None = None) -> Book:
        ctx = ensure_context(ctx)
        ctx.raise_if_cancelled()
        books = self.load_books()
        books.append(book.model_copy())

        ctx.raise_if_cancelled()
        try:
            self.save_books(books)
        except BookshelfSaveError as exc:
            if self.config.raise_on_create_save_error:
                raise
            # Historical behavior: the record is reported as created even
            # though it never reached the file.
            logger.warning("create of book %r was not persisted: %s", book.id, exc)
            warnings.warn(
                f"bookshelf: failed to save book {book.id!r}. The record has been dropped.",
                stacklevel=2,
            )
        return book

    def get_all(self, *, ctx: Context | None = None) -> list[Book]:
        ensure_context(ctx).raise_if_cancelled()
        return self.load_books()

    def save_all(self, books: Sequence[Book], *, ctx: Context | None = None) -> None:
        ensure_context(ctx).raise_if_cancelled()
        self.save_books(books)

    def get_by_id(self, book_id: str, *, ctx: Context | None = None) -> Book | None:
        ensure_context(ctx).raise_if_cancelled()
        for book in self.load_books():
            if book.id == book_id:
                return book
        return None

    def update(self, book: Book, *, ctx: Context | None = None) -> None:
        ctx = ensure_context(ctx)
        ctx.raise_if_cancelled()
        books = self.load_books()

        for index, existing in enumerate(books):
            if existing.id == book.id:
                books[index] = book.model_copy()
                break
        else:
            raise BookNotFoundError(book.id)

        ctx.raise_if_cancelled()
        self.save_books(books)

    def delete(self, book_id: str, *, ctx: Context | None = None) -> None:
        ctx = ensure_context(ctx)
        ctx.raise_if_cancelled()
        books = self.load_books()

        remaining = [book for book in books if book.id != book_id]
        if len(remaining) == len(books):
            raise BookNotFoundError(book_id, f"failed to delete the book with id: {book_id}")

        ctx.raise_if_cancelled()
        self.save_books(remaining)

    def load_books(self) -> list[Book]:
        try:
            payload = self.path.read_text(encoding=self.config.encoding)
        except FileNotFoundError:
            logger.debug("book file %s is missing, treating as empty", self.path)
            return []
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise BookshelfLoadError(f"failed to read file: {exc}") from exc
        books = books_from_json(payload)
        logger.debug("loaded %d books from %s", len(books), self.path)
        return books

    def save_books(self, books: Sequence[Book]) -> None:
        payload = books_to_json(books, indent=self.config.indent)
        # Encode before opening: opening for write truncates the file.
        try:
            data = payload.encode(self.config.encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise BookshelfSaveError(f"failed to encode books: {exc}") from exc
        try:
            self.path.write_bytes(data)
        except OSError as exc:
            raise BookshelfSaveError(f"failed to write file: {exc}") from exc
        logger.debug("saved %d books to %s", len(books), self.path)
