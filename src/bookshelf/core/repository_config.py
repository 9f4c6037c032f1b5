"""Configuration for a repository instance."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, Field, field_validator


class RepositoryConfig(BaseModel):
    """Validated configuration for a repository. Passed via DI at construction."""

    indent: int | None = Field(default=2, ge=0)
    encoding: str = "utf-8"
    raise_on_create_save_error: bool = False

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding: {value}") from exc
        return value
