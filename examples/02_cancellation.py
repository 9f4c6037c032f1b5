"""Cooperative cancellation with deadlines and parent/child contexts."""

from __future__ import annotations

from bookshelf import Book, Context, OperationCancelledError, open_repository


def main() -> None:
    repo = open_repository("memory")
    request = Context.with_timeout(5.0)

    repo.create(Book(id="1", title="Solaris", author="Stanislaw Lem", year=1961), ctx=request)

    step = request.child()
    request.cancel()
    try:
        repo.get_all(ctx=step)
    except OperationCancelledError as exc:
        print(f"Second call stopped: {exc}")

    print(f"Books stored: {len(repo.get_all())}")


if __name__ == "__main__":
    main()
