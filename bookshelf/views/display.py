"""Display data derived from catalog records.

Everything here is a pure function of its arguments; rendering the
result is left to whatever front end consumes it.
"""

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from bookshelf.errors import UnknownReferenceError
from bookshelf.models.book import Book
from bookshelf.models.criteria import ANY
from bookshelf.storage.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "Unknown"


class BookPreview(BaseModel):
    """One entry of the results list."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
    image: str


class BookDetail(BaseModel):
    """The detail overlay for a selected book."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str  # "Author (year)"
    description: str
    image: str
    blur_image: str


class ShowMoreButton(BaseModel):
    """State of the "show more" control."""

    model_config = ConfigDict(frozen=True)

    remaining: int
    disabled: bool

    @property
    def label(self) -> str:
        return f"Show more ({self.remaining})"


class Option(BaseModel):
    """A select-box option."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


def author_label(store: CatalogStore, author_id: str) -> str:
    """Resolve an author name, falling back to ``"Unknown"``."""
    try:
        return store.resolve_author_name(author_id)
    except UnknownReferenceError as exc:
        logger.warning("%s; using fallback label", exc)
        return UNKNOWN_LABEL


def preview_card(book: Book, author_name: str) -> BookPreview:
    return BookPreview(id=book.id, title=book.title, author=author_name, image=book.image)


def preview_cards(store: CatalogStore, books: Sequence[Book]) -> list[BookPreview]:
    """Preview cards for a window of results, in order."""
    return [preview_card(book, author_label(store, book.author_id)) for book in books]


def book_detail(store: CatalogStore, book: Book) -> BookDetail:
    """Build the detail view for a selected book."""
    author = author_label(store, book.author_id)
    return BookDetail(
        title=book.title,
        subtitle=f"{author} ({book.published_year})",
        description=book.description,
        image=book.image,
        blur_image=book.image,
    )


def show_more_button(remaining: int) -> ShowMoreButton:
    remaining = max(0, remaining)
    return ShowMoreButton(remaining=remaining, disabled=remaining <= 0)


def option_list(table: Mapping[str, str], default_label: str) -> list[Option]:
    """Select options for a lookup table, led by the ``"any"`` wildcard.

    Args:
        table: Id to display name, in the order to present them.
        default_label: Label of the wildcard option, e.g. "All Authors".
    """
    options = [Option(value=ANY, label=default_label)]
    options.extend(Option(value=ref_id, label=name) for ref_id, name in table.items())
    return options


def author_options(store: CatalogStore) -> list[Option]:
    return option_list(store.authors, "All Authors")


def genre_options(store: CatalogStore) -> list[Option]:
    return option_list(store.genres, "All Genres")
