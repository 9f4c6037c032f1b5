"""Interactive console helpers."""

from .line_reader import INVALID_INT_MESSAGE, LineReader

__all__ = ["INVALID_INT_MESSAGE", "LineReader"]
