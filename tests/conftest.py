from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from bookshelf.models import Book
from bookshelf.storage import BookRepository, JsonFileRepository, MemoryRepository

RepoFactory = Callable[[Sequence[Book]], BookRepository]


@pytest.fixture
def books_file(tmp_path: Path) -> Path:
    return tmp_path / "books.json"


@pytest.fixture(params=["file", "memory"])
def make_repo(request: pytest.FixtureRequest, books_file: Path) -> RepoFactory:
    """Build a repository of either backend seeded with the given books."""

    def factory(books: Sequence[Book] = ()) -> BookRepository:
        if request.param == "memory":
            return MemoryRepository(books)
        repo = JsonFileRepository(books_file)
        repo.save_all(books)
        return repo

    return factory
