"""Tests for the page cursor and window slicing."""

from collections.abc import Callable

import pytest

from bookshelf.models import Book, FilterCriteria
from bookshelf.pagination import (
    BOOKS_PER_PAGE,
    PaginationCursor,
    check_page_size,
    first_window,
    next_window,
    visible_items,
)
from bookshelf.query import evaluate


@pytest.fixture
def books(make_book: Callable[..., Book]) -> Callable[[int], list[Book]]:
    def _books(n: int) -> list[Book]:
        return [make_book(f"b{i}") for i in range(n)]

    return _books


class TestPaginationCursor:
    """Test cursor movement."""

    def test_starts_at_one(self) -> None:
        assert PaginationCursor().current() == 1

    def test_advance_increments_by_one(self) -> None:
        cursor = PaginationCursor()
        cursor.advance()
        cursor.advance()
        assert cursor.current() == 3

    def test_reset_returns_to_one(self) -> None:
        cursor = PaginationCursor()
        for _ in range(5):
            cursor.advance()
        cursor.reset()
        assert cursor.current() == 1

    def test_starting_page(self) -> None:
        assert PaginationCursor(4).current() == 4

    def test_starting_page_below_one_rejected(self) -> None:
        with pytest.raises(ValueError):
            PaginationCursor(0)

    def test_monotonic_between_resets(self) -> None:
        cursor = PaginationCursor()
        seen = [cursor.current()]
        for _ in range(10):
            cursor.advance()
            seen.append(cursor.current())
        assert seen == sorted(seen)
        assert all(page >= 1 for page in seen)


class TestFirstWindow:
    """Test the first page of a match set."""

    def test_default_page_size(self) -> None:
        assert BOOKS_PER_PAGE == 36

    def test_short_match_set(self, books: Callable[[int], list[Book]]) -> None:
        matches = books(3)
        window = first_window(matches, page_size=5)
        assert list(window.items) == matches
        assert window.remaining == 0
        assert not window.is_empty_result

    def test_long_match_set(self, books: Callable[[int], list[Book]]) -> None:
        matches = books(12)
        window = first_window(matches, page_size=5)
        assert list(window.items) == matches[:5]
        assert window.remaining == 7

    def test_empty_match_set(self) -> None:
        window = first_window([], page_size=5)
        assert window.items == ()
        assert window.remaining == 0
        assert window.is_empty_result


class TestNextWindow:
    """Test the pages revealed by show more."""

    def test_second_page(self, books: Callable[[int], list[Book]]) -> None:
        matches = books(12)
        cursor = PaginationCursor()
        window = next_window(matches, cursor, page_size=5)
        assert list(window.items) == matches[5:10]
        assert window.remaining == 2
        # Reading a window does not move the cursor
        assert cursor.current() == 1

    def test_past_the_end_is_empty(self, books: Callable[[int], list[Book]]) -> None:
        matches = books(3)
        cursor = PaginationCursor()
        for _ in range(4):
            cursor.advance()
        window = next_window(matches, cursor, page_size=5)
        assert window.items == ()
        assert window.remaining == 0
        assert not window.is_empty_result

    def test_windows_are_exhaustive(self, books: Callable[[int], list[Book]]) -> None:
        for size in (0, 1, 4, 5, 6, 17):
            matches = books(size)
            cursor = PaginationCursor()
            window = first_window(matches, page_size=5)
            collected = list(window.items)
            while window.remaining > 0:
                window = next_window(matches, cursor, page_size=5)
                cursor.advance()
                collected.extend(window.items)
            assert collected == matches

    def test_fantasy_example_with_page_size_two(self, make_book: Callable[..., Book]) -> None:
        catalog = [
            make_book("A", genres=("fantasy",)),
            make_book("B", genres=("scifi",)),
            make_book("C", genres=("fantasy",)),
        ]
        matches = evaluate(catalog, FilterCriteria(genre_id="fantasy"))
        assert [b.id for b in matches] == ["A", "C"]

        cursor = PaginationCursor()
        cursor.reset()
        window = first_window(matches, page_size=2)
        assert [b.id for b in window.items] == ["A", "C"]
        assert window.remaining == 0

        cursor.advance()
        window = next_window(matches, cursor, page_size=2)
        assert window.items == ()
        assert window.remaining == 0


class TestVisibleItems:
    """Test the items revealed so far."""

    def test_grows_with_cursor(self, books: Callable[[int], list[Book]]) -> None:
        matches = books(7)
        cursor = PaginationCursor()
        assert len(visible_items(matches, cursor, page_size=3)) == 3
        cursor.advance()
        assert len(visible_items(matches, cursor, page_size=3)) == 6
        cursor.advance()
        assert list(visible_items(matches, cursor, page_size=3)) == matches


class TestPageSizeValidation:
    """Test that every windowing entry point rejects empty pages."""

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_first_window_rejects(self, page_size: int) -> None:
        with pytest.raises(ValueError, match="page_size must be positive"):
            first_window([], page_size=page_size)

    @pytest.mark.parametrize("page_size", [0, -3])
    def test_next_window_rejects(self, page_size: int) -> None:
        with pytest.raises(ValueError, match="page_size must be positive"):
            next_window([], PaginationCursor(), page_size=page_size)

    def test_visible_items_rejects(self) -> None:
        with pytest.raises(ValueError, match="page_size must be positive"):
            visible_items([], PaginationCursor(), page_size=0)

    def test_check_page_size_accepts_positive(self) -> None:
        check_page_size(1)
        check_page_size(BOOKS_PER_PAGE)
