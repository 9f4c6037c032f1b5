"""Rich-based book table rendering."""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import Book

EMPTY_MESSAGE = "No books."


def render_books(books: Sequence[Book], *, title: str = "Books") -> str:
    if not books:
        return EMPTY_MESSAGE + "\n"

    table = Table(title=f"{title} ({len(books)})")
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Year", justify="right")
    for book in books:
        table.add_row(Text(book.id), Text(book.title), Text(book.author), str(book.year))

    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(table)
    return console.export_text()


def render_book(book: Book) -> str:
    lines = [
        f"ID: {book.id}",
        f"Title: {book.title}",
        f"Author: {book.author}",
        f"Year: {book.year}",
    ]
    return "\n".join(lines) + "\n"
