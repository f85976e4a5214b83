"""Display data for catalog records and result windows."""

from bookshelf.views.display import (
    UNKNOWN_LABEL,
    BookDetail,
    BookPreview,
    Option,
    ShowMoreButton,
    author_label,
    author_options,
    book_detail,
    genre_options,
    option_list,
    preview_card,
    preview_cards,
    show_more_button,
)

__all__ = [
    "UNKNOWN_LABEL",
    "BookDetail",
    "BookPreview",
    "Option",
    "ShowMoreButton",
    "author_label",
    "author_options",
    "book_detail",
    "genre_options",
    "option_list",
    "preview_card",
    "preview_cards",
    "show_more_button",
]
