"""Core primitives shared by the repositories."""

from .context import Context, background, ensure_context
from .repository_config import RepositoryConfig

__all__ = ["Context", "RepositoryConfig", "background", "ensure_context"]
