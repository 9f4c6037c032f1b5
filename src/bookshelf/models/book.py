"""Book model — the only persisted entity."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A single catalog record.

    Attribute names are snake_case; the persisted JSON keys are ``ID``,
    ``Title``, ``Author`` and ``Year``. Either form is accepted on input.
    """

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    id: str = Field(default="", alias="ID")
    title: str = Field(default="", alias="Title")
    author: str = Field(default="", alias="Author")
    year: int = Field(default=0, alias="Year")
