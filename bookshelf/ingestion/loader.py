"""Catalog document loader supporting JSON and YAML files."""

import json
import logging
from pathlib import Path
from typing import Any

import chardet
import yaml
from pydantic import ValidationError

from bookshelf.errors import InvalidDataError
from bookshelf.models.parsed import ParsedCatalog
from bookshelf.storage.catalog_store import CatalogStore

logger = logging.getLogger(__name__)

# Supported file extensions mapped to format identifiers
SUPPORTED_FORMATS: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class CatalogLoader:
    """Reads a catalog document into a ParsedCatalog.

    A catalog document is a mapping with three keys: ``books`` (a list of
    book records), ``authors`` and ``genres`` (id to display name).
    """

    def load(self, file_path: str | Path) -> ParsedCatalog:
        """Read and decode a catalog document.

        Args:
            file_path: Path to the catalog file.

        Returns:
            The raw catalog tables.

        Raises:
            FileNotFoundError: If file_path does not exist.
            InvalidDataError: If the format is unsupported or the document
                does not have the expected shape.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        file_format = self._detect_format(path)
        text = self._read_text(path)

        dispatch = {
            "json": self._parse_json,
            "yaml": self._parse_yaml,
        }
        document = dispatch[file_format](text, path)

        if not isinstance(document, dict):
            raise InvalidDataError(f"Catalog document must be a mapping: {path}")
        unknown = set(document) - {"books", "authors", "genres"}
        if unknown:
            logger.warning("Ignoring unknown catalog keys in %s: %s", path, sorted(unknown))

        try:
            parsed = ParsedCatalog(
                books=document.get("books") or [],
                authors=document.get("authors") or {},
                genres=document.get("genres") or {},
                source_path=str(path),
                file_format=file_format,
            )
        except ValidationError as exc:
            raise InvalidDataError(f"Malformed catalog document {path}: {exc}") from exc

        logger.info("Read %d book records from %s", len(parsed.books), path)
        return parsed

    def load_store(self, file_path: str | Path) -> CatalogStore:
        """Read a catalog document and build a validated CatalogStore."""
        parsed = self.load(file_path)
        return CatalogStore.load(parsed.books, parsed.authors, parsed.genres)

    def _detect_format(self, file_path: Path) -> str:
        """Determine file format from extension.

        Raises:
            InvalidDataError: If extension is not supported.
        """
        ext = file_path.suffix.lower()
        if ext not in SUPPORTED_FORMATS:
            raise InvalidDataError(
                f"Unsupported catalog format: '{ext}'. "
                f"Supported: {', '.join(SUPPORTED_FORMATS.keys())}"
            )
        return SUPPORTED_FORMATS[ext]

    def _read_text(self, file_path: Path) -> str:
        """Read a text file, falling back to encoding detection.

        Args:
            file_path: Path to the text file.

        Returns:
            The file content as a string.
        """
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence", 0)

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.error("Failed to decode file: %s", file_path)
            return raw_bytes.decode("utf-8", errors="replace")

    def _parse_json(self, text: str, file_path: Path) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidDataError(f"Invalid JSON in {file_path}: {exc}") from exc

    def _parse_yaml(self, text: str, file_path: Path) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidDataError(f"Invalid YAML in {file_path}: {exc}") from exc
