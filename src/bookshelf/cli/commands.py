"""Subcommand implementations."""

from __future__ import annotations

import sys
from pathlib import Path

from ..console import LineReader
from ..exceptions import BookshelfError
from ..models import Book
from ..renderers import render_book, render_books
from ..serializers import books_to_json, load_books_json
from ..storage import BookRepository


def run_list(repo: BookRepository, *, as_json: bool) -> int:
    books = repo.get_all()
    if as_json:
        print(books_to_json(books))
    else:
        print(render_books(books), end="")
    return 0


def run_show(repo: BookRepository, book_id: str, *, as_json: bool) -> int:
    book = repo.get_by_id(book_id)
    if book is None:
        print(f"Error: book not found: {book_id}", file=sys.stderr)
        return 1
    if as_json:
        print(book.model_dump_json(indent=2, by_alias=True))
    else:
        print(render_book(book), end="")
    return 0


def run_add(
    repo: BookRepository,
    reader: LineReader,
    *,
    book_id: str | None,
    title: str | None,
    author: str | None,
    year: int | None,
) -> int:
    book = Book(
        id=book_id if book_id is not None else reader.read_str("ID: "),
        title=title if title is not None else reader.read_str("Title: "),
        author=author if author is not None else reader.read_str("Author: "),
        year=year if year is not None else reader.read_int("Year: "),
    )
    created = repo.create(book)
    print(f"Added book {created.id}")
    return 0


def run_update(
    repo: BookRepository,
    reader: LineReader,
    book_id: str,
    *,
    title: str | None,
    author: str | None,
    year: int | None,
) -> int:
    current = repo.get_by_id(book_id)
    if current is None:
        print(f"Error: book not found: {book_id}", file=sys.stderr)
        return 1

    if title is None:
        title = reader.read_str(f"Title [{current.title}]: ") or current.title
    if author is None:
        author = reader.read_str(f"Author [{current.author}]: ") or current.author
    if year is None:
        year = reader.read_optional_int(f"Year [{current.year}]: ", default=current.year)

    repo.update(Book(id=book_id, title=title, author=author, year=year))
    print(f"Updated book {book_id}")
    return 0


def run_delete(repo: BookRepository, book_id: str) -> int:
    repo.delete(book_id)
    print(f"Deleted book {book_id}")
    return 0


def run_import(repo: BookRepository, source: Path) -> int:
    try:
        books = load_books_json(source)
    except FileNotFoundError:
        print(f"Error: file not found: {source}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    except BookshelfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    repo.save_all(books)
    print(f"Imported {len(books)} books")
    return 0


def run_export(repo: BookRepository, *, output_path: Path | None) -> int:
    payload = books_to_json(repo.get_all())
    if output_path is not None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"Error writing file: {exc}", file=sys.stderr)
            return 1
    else:
        print(payload)
    return 0
