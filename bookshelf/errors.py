"""Exceptions raised by the catalog engine."""


class BookshelfError(Exception):
    """Base class for all catalog engine errors."""


class InvalidDataError(BookshelfError):
    """The catalog is malformed or referentially inconsistent.

    Raised only while loading; a catalog that fails to load is fatal.
    """


class UnknownReferenceError(BookshelfError, KeyError):
    """An author or genre id is not present in its lookup table."""

    def __init__(self, table: str, ref_id: str) -> None:
        super().__init__(table, ref_id)
        self.table = table
        self.ref_id = ref_id

    def __str__(self) -> str:
        return f"Unknown {self.table} id: {self.ref_id!r}"
