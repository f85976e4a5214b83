"""Entry point for the Bookshelf catalog browser."""

import logging
import shlex

from bookshelf.config import load_config
from bookshelf.ingestion import CatalogLoader
from bookshelf.models import FilterCriteria, Window
from bookshelf.pagination import BrowseSession
from bookshelf.views import book_detail, preview_cards, show_more_button

HELP = """Commands:
  search [title=...] [author=<id>] [genre=<id>]
  more
  show <book id>
  authors | genres
  quit"""


def print_window(session: BrowseSession, window: Window) -> None:
    if window.is_empty_result:
        print("No results found. Your filters might be too narrow.")
        return
    for card in preview_cards(session.store, window.items):
        print(f"  [{card.id}] {card.title} - {card.author}")
    button = show_more_button(window.remaining)
    print(f"{button.label}{' (disabled)' if button.disabled else ''}")


def main() -> None:
    """Load the catalog and run an interactive browse loop."""
    config = load_config()
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    store = CatalogLoader().load_store(config.catalog.path)
    session = BrowseSession(store)

    print(f"{config.app.name} {config.app.version}")
    print_window(session, session.first_window())
    print(HELP)

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        try:
            command, *args = shlex.split(line)
        except ValueError as exc:
            print(f"Could not parse command: {exc}")
            print(HELP)
            continue
        if not command:
            continue

        if command == "quit":
            break
        elif command == "search":
            form = dict(arg.split("=", 1) for arg in args if "=" in arg)
            print_window(session, session.submit(FilterCriteria.from_form(form)))
        elif command == "more":
            print_window(session, session.show_more())
        elif command == "show" and args:
            book = session.select(args[0])
            if book is None:
                print(f"No book with id {args[0]!r}")
                continue
            detail = book_detail(store, book)
            print(f"{detail.title}\n{detail.subtitle}\n\n{detail.description}")
        elif command in ("authors", "genres"):
            table = store.authors if command == "authors" else store.genres
            for ref_id, name in table.items():
                print(f"  {ref_id}: {name}")
        else:
            print(HELP)


if __name__ == "__main__":
    main()
