"""Prompt for one book on stdin and store it in data/books.json."""

from __future__ import annotations

from bookshelf import Book, BookshelfError
from bookshelf.console import LineReader
from bookshelf.storage import JsonFileRepository


def main() -> int:
    reader = LineReader()
    repo = JsonFileRepository("data/books.json")

    book = Book(
        id=reader.read_str("ID: "),
        title=reader.read_str("Title: "),
        author=reader.read_str("Author: "),
        year=reader.read_int("Year: "),
    )
    try:
        if repo.get_by_id(book.id) is None:
            repo.create(book)
        else:
            repo.update(book)
    except BookshelfError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Stored {book.title!r} ({book.year})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
