"""Catalog querying."""

from bookshelf.query.evaluator import (
    author_matches,
    evaluate,
    genre_matches,
    matches,
    title_matches,
)

__all__ = [
    "author_matches",
    "evaluate",
    "genre_matches",
    "matches",
    "title_matches",
]
