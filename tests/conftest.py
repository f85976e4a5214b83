"""Shared fixtures for catalog tests."""

from collections.abc import Callable
from datetime import datetime

import pytest

from bookshelf.models import Book
from bookshelf.storage import CatalogStore

AUTHORS = {"a1": "Ursula K. Le Guin", "a2": "Frank Herbert", "a3": "J.R.R. Tolkien"}
GENRES = {"fantasy": "Fantasy", "scifi": "Science Fiction", "classic": "Classics"}


@pytest.fixture
def make_book() -> Callable[..., Book]:
    def _make(
        book_id: str,
        title: str = "",
        author: str = "a1",
        genres: tuple[str, ...] = ("fantasy",),
        published: datetime = datetime(1968, 11, 1),
    ) -> Book:
        return Book(
            id=book_id,
            title=title or f"Book {book_id}",
            author=author,
            genres=genres,
            image=f"https://covers.example.org/{book_id}.jpg",
            description=f"About {book_id}",
            published=published,
        )

    return _make


@pytest.fixture
def numbered_store(make_book: Callable[..., Book]) -> Callable[[int], CatalogStore]:
    """Build a store of ``n`` books with ids b0..b{n-1}."""

    def _build(n: int) -> CatalogStore:
        books = [make_book(f"b{i}") for i in range(n)]
        return CatalogStore.load(books, AUTHORS, GENRES)

    return _build
