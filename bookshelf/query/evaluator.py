"""Filter evaluation over the catalog."""

from collections.abc import Iterable

from bookshelf.models.book import Book
from bookshelf.models.criteria import ANY, FilterCriteria


def title_matches(book: Book, title: str) -> bool:
    """Case-insensitive substring test; a blank query matches every title."""
    if not title.strip():
        return True
    return title.lower() in book.title.lower()


def author_matches(book: Book, author_id: str) -> bool:
    return author_id == ANY or book.author_id == author_id


def genre_matches(book: Book, genre_id: str) -> bool:
    return genre_id == ANY or genre_id in book.genre_ids


def matches(book: Book, criteria: FilterCriteria) -> bool:
    """Return True if the book satisfies all three criteria."""
    return (
        title_matches(book, criteria.title)
        and author_matches(book, criteria.author_id)
        and genre_matches(book, criteria.genre_id)
    )


def evaluate(catalog: Iterable[Book], criteria: FilterCriteria) -> tuple[Book, ...]:
    """Select the books matching ``criteria``.

    The result keeps catalog order; nothing is ranked or sorted.

    Args:
        catalog: Books in catalog order.
        criteria: The submitted filter.

    Returns:
        The match set.
    """
    return tuple(book for book in catalog if matches(book, criteria))
