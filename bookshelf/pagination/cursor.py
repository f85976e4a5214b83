"""Page counter for the current match set."""


class PaginationCursor:
    """Counts how many pages of the match set have been revealed.

    Starts at 1 and only moves forward; ``reset`` is the one way back.

    Args:
        page: Starting page, used to carry a position into a new cursor.
    """

    def __init__(self, page: int = 1) -> None:
        if page < 1:
            raise ValueError(f"page must be at least 1, got {page}")
        self._page = page

    def reset(self) -> None:
        self._page = 1

    def advance(self) -> None:
        """Move to the next page, even past the end of the match set."""
        self._page += 1

    def current(self) -> int:
        return self._page

    def __repr__(self) -> str:
        return f"PaginationCursor(page={self._page})"
