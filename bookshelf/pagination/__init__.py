"""Paging through a match set."""

from bookshelf.pagination.cursor import PaginationCursor
from bookshelf.pagination.session import BrowseSession, BrowseSnapshot
from bookshelf.pagination.window import (
    BOOKS_PER_PAGE,
    check_page_size,
    first_window,
    next_window,
    visible_items,
)

__all__ = [
    "BOOKS_PER_PAGE",
    "BrowseSession",
    "BrowseSnapshot",
    "PaginationCursor",
    "check_page_size",
    "first_window",
    "next_window",
    "visible_items",
]
