"""Storage backends."""

from .base import BookRepository
from .file import JsonFileRepository
from .memory import MemoryRepository

__all__ = ["BookRepository", "JsonFileRepository", "MemoryRepository"]
