"""Browse session: the active match set and its page cursor."""

import logging
import threading
from dataclasses import dataclass, field

from bookshelf.models.book import Book
from bookshelf.models.criteria import FilterCriteria
from bookshelf.models.window import Window
from bookshelf.pagination.cursor import PaginationCursor
from bookshelf.pagination.window import (
    BOOKS_PER_PAGE,
    check_page_size,
    first_window,
    next_window,
    visible_items,
)
from bookshelf.query.evaluator import evaluate
from bookshelf.storage.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowseSnapshot:
    """A match set, the criteria that produced it and the pages revealed."""

    criteria: FilterCriteria
    matches: tuple[Book, ...]
    page: int


@dataclass(frozen=True)
class _BrowseState:
    """A match set together with the cursor that pages through it.

    Once published on a session, neither the state nor its cursor change;
    every transition builds a new state.
    """

    criteria: FilterCriteria
    matches: tuple[Book, ...]
    cursor: PaginationCursor = field(default_factory=PaginationCursor)


class BrowseSession:
    """Drives search, "show more" and item selection for one user.

    Both ``submit`` and ``show_more`` swap in a new state object in a
    single assignment, so a reader holding a snapshot always sees a match
    set with its own page count.

    Args:
        store: The loaded catalog.
        page_size: Items per page.
    """

    def __init__(self, store: CatalogStore, page_size: int = BOOKS_PER_PAGE) -> None:
        check_page_size(page_size)
        self._store = store
        self._page_size = page_size
        self._lock = threading.Lock()
        # Before any search the whole catalog is on display
        self._state = _BrowseState(criteria=FilterCriteria(), matches=store.books)

    @property
    def store(self) -> CatalogStore:
        return self._store

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    @property
    def matches(self) -> tuple[Book, ...]:
        return self._state.matches

    @property
    def page(self) -> int:
        return self._state.cursor.current()

    @property
    def remaining(self) -> int:
        """Matches not yet revealed."""
        state = self._state
        shown = state.cursor.current() * self._page_size
        return max(0, len(state.matches) - shown)

    @property
    def visible(self) -> tuple[Book, ...]:
        """Every item revealed so far, in match-set order."""
        state = self._state
        return visible_items(state.matches, state.cursor, self._page_size)

    def snapshot(self) -> BrowseSnapshot:
        """Criteria, match set and page read from one state."""
        state = self._state
        return BrowseSnapshot(
            criteria=state.criteria,
            matches=state.matches,
            page=state.cursor.current(),
        )

    def first_window(self) -> Window:
        """First page of the current match set, without re-querying."""
        return first_window(self._state.matches, self._page_size)

    def submit(self, criteria: FilterCriteria) -> Window:
        """Run a new query and return its first page.

        Args:
            criteria: The submitted filter.

        Returns:
            The first window of the new match set.
        """
        found = evaluate(self._store.books, criteria)
        cursor = PaginationCursor()
        cursor.reset()
        state = _BrowseState(criteria=criteria, matches=found, cursor=cursor)
        with self._lock:
            self._state = state
        logger.debug("Query %r matched %d books", criteria, len(found))
        return first_window(found, self._page_size)

    def show_more(self) -> Window:
        """Reveal the next page of the current match set."""
        with self._lock:
            state = self._state
            window = next_window(state.matches, state.cursor, self._page_size)
            cursor = PaginationCursor(state.cursor.current())
            cursor.advance()
            self._state = _BrowseState(
                criteria=state.criteria,
                matches=state.matches,
                cursor=cursor,
            )
        return window

    def select(self, book_id: str) -> Book | None:
        """Look up a book by id, regardless of the active filter."""
        return self._store.find_by_id(book_id)
