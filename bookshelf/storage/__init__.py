"""Catalog storage."""

from bookshelf.storage.catalog_store import CatalogStore

__all__ = ["CatalogStore"]
