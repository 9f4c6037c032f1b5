"""Basic usage example using the convenience API."""

from __future__ import annotations

from pathlib import Path

from bookshelf import Book, open_repository
from bookshelf.renderers import render_books


def main() -> None:
    repo = open_repository(Path("artifacts") / "books.json")

    repo.save_all([])
    repo.create(Book(id="1", title="Dune", author="Frank Herbert", year=1965))
    repo.create(Book(id="2", title="Neuromancer", author="William Gibson", year=1984))
    repo.update(Book(id="2", title="Count Zero", author="William Gibson", year=1986))

    print(render_books(repo.get_all()), end="")
    print(f"Lookup of missing ID returns: {repo.get_by_id('404')}")


if __name__ == "__main__":
    main()
