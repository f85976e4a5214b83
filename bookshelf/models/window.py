"""Result window data model."""

from pydantic import BaseModel, ConfigDict

from bookshelf.models.book import Book


class Window(BaseModel):
    """A slice of the match set ready for display."""

    model_config = ConfigDict(frozen=True)

    items: tuple[Book, ...] = ()
    remaining: int = 0
    page: int = 1  # pages revealed once this window is shown

    @property
    def is_empty_result(self) -> bool:
        """True for the first window of a query that matched nothing."""
        return self.remaining == 0 and not self.items and self.page == 1
