"""Slicing the match set into display windows."""

from collections.abc import Sequence

from bookshelf.models.book import Book
from bookshelf.models.window import Window
from bookshelf.pagination.cursor import PaginationCursor

# Items revealed per "show more"
BOOKS_PER_PAGE = 36


def check_page_size(page_size: int) -> None:
    """Raise ValueError unless ``page_size`` is a positive integer."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")


def first_window(matches: Sequence[Book], page_size: int = BOOKS_PER_PAGE) -> Window:
    """Return the first page of a fresh match set.

    Pair every call with ``PaginationCursor.reset()``.
    """
    check_page_size(page_size)
    return Window(
        items=tuple(matches[:page_size]),
        remaining=max(0, len(matches) - page_size),
        page=1,
    )


def next_window(
    matches: Sequence[Book],
    cursor: PaginationCursor,
    page_size: int = BOOKS_PER_PAGE,
) -> Window:
    """Return the page following the ones already revealed.

    Reads the cursor without moving it; the caller advances it afterwards.
    Past the end of the match set the window is empty.

    Args:
        matches: The current match set.
        cursor: Pages revealed so far.
        page_size: Items per page.

    Returns:
        Items ``[page * page_size, (page + 1) * page_size)`` and the count
        of items still hidden after them.

    Raises:
        ValueError: If page_size is not positive.
    """
    check_page_size(page_size)
    page = cursor.current()
    start = page * page_size
    end = start + page_size
    return Window(
        items=tuple(matches[start:end]),
        remaining=max(0, len(matches) - end),
        page=page + 1,
    )


def visible_items(
    matches: Sequence[Book],
    cursor: PaginationCursor,
    page_size: int = BOOKS_PER_PAGE,
) -> tuple[Book, ...]:
    """Everything revealed so far: items ``[0, page * page_size)``."""
    check_page_size(page_size)
    return tuple(matches[: cursor.current() * page_size])
