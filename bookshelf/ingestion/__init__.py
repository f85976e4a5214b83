"""Catalog ingestion: reading catalog documents from disk."""

from bookshelf.ingestion.loader import SUPPORTED_FORMATS, CatalogLoader

__all__ = ["CatalogLoader", "SUPPORTED_FORMATS"]
