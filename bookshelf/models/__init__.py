"""Data models for the Bookshelf catalog browser."""

from bookshelf.models.book import Book
from bookshelf.models.criteria import ANY, FilterCriteria
from bookshelf.models.parsed import ParsedCatalog
from bookshelf.models.window import Window

__all__ = [
    "ANY",
    "Book",
    "FilterCriteria",
    "ParsedCatalog",
    "Window",
]
