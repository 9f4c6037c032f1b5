"""Console renderers."""

from .console import EMPTY_MESSAGE, render_book, render_books

__all__ = ["EMPTY_MESSAGE", "render_book", "render_books"]
