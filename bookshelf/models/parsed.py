"""Raw catalog document as read from disk, before validation."""

from typing import Any

from pydantic import BaseModel, Field


class ParsedCatalog(BaseModel):
    """The three tables of a catalog document.

    ``books`` stays as raw mappings; turning them into ``Book`` records
    and checking references is the catalog store's job.
    """

    books: list[dict[str, Any]] = Field(default_factory=list)
    authors: dict[str, str] = Field(default_factory=dict)
    genres: dict[str, str] = Field(default_factory=dict)
    source_path: str = ""
    file_format: str = ""  # "json", "yaml"
