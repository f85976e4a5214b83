"""Book data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """A single catalog entry.

    Catalog documents use the short keys ``author``, ``genres`` and
    ``published``; both those and the field names are accepted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    title: str
    author_id: str = Field(alias="author")
    genre_ids: tuple[str, ...] = Field(default=(), alias="genres")
    image: str = ""
    description: str = ""
    published_date: datetime = Field(alias="published")

    @field_validator("genre_ids")
    @classmethod
    def _dedupe_genres(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))

    @property
    def published_year(self) -> int:
        return self.published_date.year
