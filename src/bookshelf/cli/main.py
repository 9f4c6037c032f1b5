"""Command line interface for bookshelf."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from ..console import LineReader
from ..exceptions import BookshelfError
from ..storage import JsonFileRepository
from .commands import run_add, run_delete, run_export, run_import, run_list, run_show, run_update

DATA_FILE_ENV = "BOOKSHELF_DATA_FILE"
DEFAULT_DATA_FILE = Path("data/books.json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookshelf", description="Personal library catalog")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help=f"Path to the books JSON file (default: ${DATA_FILE_ENV} or {DEFAULT_DATA_FILE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List all books")
    list_parser.add_argument("--json", action="store_true", help="Emit the JSON array")

    show_parser = subparsers.add_parser("show", help="Show one book")
    show_parser.add_argument("book_id", help="Book ID")
    show_parser.add_argument("--json", action="store_true", help="Emit the book as JSON")

    add_parser = subparsers.add_parser("add", help="Add a book, prompting for missing fields")
    add_parser.add_argument("--id", dest="book_id", default=None)
    _add_field_arguments(add_parser)

    update_parser = subparsers.add_parser(
        "update", help="Replace a book, prompting for missing fields"
    )
    update_parser.add_argument("book_id", help="Book ID")
    _add_field_arguments(update_parser)

    delete_parser = subparsers.add_parser("delete", help="Delete a book")
    delete_parser.add_argument("book_id", help="Book ID")

    import_parser = subparsers.add_parser("import", help="Replace the catalog with a JSON file")
    import_parser.add_argument("source", type=Path, help="Path to a books JSON array")

    export_parser = subparsers.add_parser("export", help="Write the catalog as JSON")
    export_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path (default: stdout)",
    )
    return parser


def _add_field_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", default=None)
    parser.add_argument("--author", default=None)
    parser.add_argument("--year", type=int, default=None)


def resolve_data_file(data_file: Path | None) -> Path:
    if data_file is not None:
        return data_file
    env_value = os.environ.get(DATA_FILE_ENV)
    if env_value:
        return Path(env_value)
    return DEFAULT_DATA_FILE


def configure_logging(*, verbose: bool) -> None:
    """Route the package logger to stderr through rich. Safe to call repeatedly."""
    logger = logging.getLogger("bookshelf")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def main(argv: list[str] | None = None, *, reader: LineReader | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    reader = reader or LineReader()
    repo = JsonFileRepository(resolve_data_file(args.data_file))

    try:
        return _dispatch(args, repo, reader)
    except BookshelfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: input ended before all fields were entered", file=sys.stderr)
        return 1


def _dispatch(args: argparse.Namespace, repo: JsonFileRepository, reader: LineReader) -> int:
    if args.command == "list":
        return run_list(repo, as_json=args.json)
    if args.command == "show":
        return run_show(repo, args.book_id, as_json=args.json)
    if args.command == "add":
        return run_add(
            repo,
            reader,
            book_id=args.book_id,
            title=args.title,
            author=args.author,
            year=args.year,
        )
    if args.command == "update":
        return run_update(
            repo, reader, args.book_id, title=args.title, author=args.author, year=args.year
        )
    if args.command == "delete":
        return run_delete(repo, args.book_id)
    if args.command == "import":
        return run_import(repo, args.source)
    if args.command == "export":
        return run_export(repo, output_path=args.output)
    raise ValueError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
