"""Filter criteria submitted from the search form."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

# Wildcard value for the author and genre selectors
ANY = "any"


class FilterCriteria(BaseModel):
    """Immutable search criteria: title substring, author and genre."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    author_id: str = ANY
    genre_id: str = ANY

    @classmethod
    def from_form(cls, form: Mapping[str, str | None]) -> FilterCriteria:
        """Build criteria from raw form values.

        Accepts the form field names ``title``, ``author`` and ``genre``.
        A missing or blank selector counts as ``"any"``.
        """
        author = (form.get("author") or "").strip()
        genre = (form.get("genre") or "").strip()
        return cls(
            title=form.get("title") or "",
            author_id=author or ANY,
            genre_id=genre or ANY,
        )

    def is_empty(self) -> bool:
        """Return True if these criteria select the whole catalog."""
        return (
            not self.title.strip()
            and self.author_id == ANY
            and self.genre_id == ANY
        )
