"""Serialization helpers."""

from .json import books_from_json, books_to_json, load_books_json, save_books_json

__all__ = ["books_from_json", "books_to_json", "load_books_json", "save_books_json"]
