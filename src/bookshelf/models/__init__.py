"""Data models."""

from .book import Book

__all__ = ["Book"]
