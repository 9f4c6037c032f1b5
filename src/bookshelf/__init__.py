"""bookshelf — a personal library catalog kept in one JSON file.

Convenience API:
    bookshelf.open_repository("file://data/books.json") -> JsonFileRepository
    bookshelf.open_repository("memory")                 -> MemoryRepository

DI API (construct your own repository):
    from bookshelf.storage import JsonFileRepository
    from bookshelf.core import RepositoryConfig
    repo = JsonFileRepository("books.json", config=RepositoryConfig(...))
    repo.create(Book(id="1", title="Dune", author="Frank Herbert", year=1965))
"""

from __future__ import annotations

from pathlib import Path

from .core import Context, RepositoryConfig, background
from .exceptions import (
    BookNotFoundError,
    BookshelfError,
    BookshelfLoadError,
    BookshelfSaveError,
    OperationCancelledError,
)
from .models import Book
from .storage import BookRepository, JsonFileRepository, MemoryRepository


def open_repository(
    storage: str | Path | BookRepository = "memory",
    *,
    config: RepositoryConfig | None = None,
) -> BookRepository:
    """Resolve a storage value into a repository.

    Accepts ``"memory"``, ``"file://<path>"``, a filesystem path, or an
    existing repository, which is returned as is.
    """
    if isinstance(storage, Path):
        return JsonFileRepository(storage, config=config)
    if not isinstance(storage, str):
        return storage
    if storage == "memory":
        return MemoryRepository()
    if storage.startswith("file://"):
        return JsonFileRepository(storage.removeprefix("file://"), config=config)
    if storage:
        return JsonFileRepository(storage, config=config)
    raise ValueError(
        "Unsupported storage value. Use 'memory', 'file://<path>', a path, "
        "or a BookRepository instance."
    )


__all__ = [
    "Book",
    "BookNotFoundError",
    "BookRepository",
    "BookshelfError",
    "BookshelfLoadError",
    "BookshelfSaveError",
    "Context",
    "JsonFileRepository",
    "MemoryRepository",
    "OperationCancelledError",
    "RepositoryConfig",
    "background",
    "open_repository",
]
