"""JSON serialization helpers for book collections."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import BookshelfLoadError, BookshelfSaveError
from ..models import Book

_BOOK_LIST: TypeAdapter[list[Book] | None] = TypeAdapter(list[Book] | None)


def books_to_json(books: Sequence[Book], *, indent: int | None = 2) -> str:
    """Serialize books as a JSON array using the persisted key names.

    Raises ``BookshelfSaveError`` if the collection cannot be serialized.
    """
    try:
        payload = _BOOK_LIST.dump_json(list(books), indent=indent, by_alias=True)
    except PydanticSerializationError as exc:
        raise BookshelfSaveError(f"failed to marshal books: {exc}") from exc
    return payload.decode("utf-8")


def books_from_json(payload: str | bytes) -> list[Book]:
    """Parse a JSON array into books.

    A ``null`` document is an empty collection.
    Raises ``BookshelfLoadError`` on invalid or wrongly shaped input.
    """
    try:
        books = _BOOK_LIST.validate_json(payload)
    except ValidationError as exc:
        raise BookshelfLoadError(f"failed to parse books JSON: {exc}") from exc
    return books or []


def save_books_json(
    books: Sequence[Book],
    path: str | Path,
    *,
    indent: int | None = 2,
    encoding: str = "utf-8",
) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(books_to_json(books, indent=indent), encoding=encoding)
    return output_path


def load_books_json(path: str | Path, *, encoding: str = "utf-8") -> list[Book]:
    """Load books from a JSON file.

    Raises ``BookshelfLoadError`` on invalid content,
    or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    payload = Path(path).read_text(encoding=encoding)
    return books_from_json(payload)
