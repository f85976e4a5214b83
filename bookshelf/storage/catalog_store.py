"""In-memory, read-only catalog of books with author and genre tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from bookshelf.errors import InvalidDataError, UnknownReferenceError
from bookshelf.models.book import Book

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the catalog and its lookup tables.

    Build instances with :meth:`load`; nothing mutates a store afterwards.
    Books keep the order of the source catalog.
    """

    def __init__(
        self,
        books: tuple[Book, ...],
        authors: Mapping[str, str],
        genres: Mapping[str, str],
    ) -> None:
        """Wrap tables that are already consistent.

        No checks run here; go through :meth:`load` for untrusted data.
        """
        self._books = books
        self._by_id = {book.id: book for book in books}
        self._authors = MappingProxyType(dict(authors))
        self._genres = MappingProxyType(dict(genres))

    @classmethod
    def load(
        cls,
        books: Iterable[Book | Mapping[str, Any]],
        authors: Mapping[str, str],
        genres: Mapping[str, str],
    ) -> CatalogStore:
        """Validate the catalog and build a store.

        Args:
            books: Book records, or raw mappings using catalog document keys.
            authors: Author id to display name.
            genres: Genre id to display name.

        Returns:
            A populated CatalogStore.

        Raises:
            InvalidDataError: If a record is malformed, two records share an
                id, or a record references an unknown author or genre.
        """
        records: list[Book] = []
        seen: set[str] = set()

        for index, entry in enumerate(books):
            book = cls._coerce(entry, index)
            if book.id in seen:
                raise InvalidDataError(f"Duplicate book id: {book.id!r}")
            if book.author_id not in authors:
                raise InvalidDataError(
                    f"Book {book.id!r} references unknown author {book.author_id!r}"
                )
            missing = [g for g in book.genre_ids if g not in genres]
            if missing:
                raise InvalidDataError(
                    f"Book {book.id!r} references unknown genres: {', '.join(missing)}"
                )
            seen.add(book.id)
            records.append(book)

        logger.info(
            "Loaded catalog: %d books, %d authors, %d genres",
            len(records),
            len(authors),
            len(genres),
        )
        return cls(tuple(records), authors, genres)

    @staticmethod
    def _coerce(entry: Book | Mapping[str, Any], index: int) -> Book:
        if isinstance(entry, Book):
            return entry
        if not isinstance(entry, Mapping):
            raise InvalidDataError(
                f"Book at position {index} is a {type(entry).__name__}, not a mapping"
            )
        try:
            return Book.model_validate(dict(entry))
        except ValidationError as exc:
            raise InvalidDataError(f"Malformed book at position {index}: {exc}") from exc

    @property
    def books(self) -> tuple[Book, ...]:
        return self._books

    @property
    def authors(self) -> Mapping[str, str]:
        return self._authors

    @property
    def genres(self) -> Mapping[str, str]:
        return self._genres

    def __len__(self) -> int:
        return len(self._books)

    def find_by_id(self, book_id: str) -> Book | None:
        """Look a book up by id; ``None`` when there is no such book."""
        return self._by_id.get(book_id)

    def resolve_author_name(self, author_id: str) -> str:
        """Return the display name of an author.

        Raises:
            UnknownReferenceError: If the author id is not in the table.
        """
        try:
            return self._authors[author_id]
        except KeyError:
            raise UnknownReferenceError("author", author_id) from None

    def resolve_genre_name(self, genre_id: str) -> str:
        """Return the display name of a genre.

        Raises:
            UnknownReferenceError: If the genre id is not in the table.
        """
        try:
            return self._genres[genre_id]
        except KeyError:
            raise UnknownReferenceError("genre", genre_id) from None
