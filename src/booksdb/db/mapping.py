# ABOUTME: The Book record type and conversions to and from BOOKS table rows.
# ABOUTME: Also provides the flat text renderings used for display.

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


def normalize_synopsis(value: str | None) -> str | None:
    """Treat an empty synopsis as no synopsis at all."""
    return value if value else None


def _display(value: object) -> str:
    return "null" if value is None else str(value)


@dataclass(frozen=True)
class Book:
    """One row of the BOOKS table."""

    id: int
    title: str
    author: str
    publisher: str
    publication_year: int
    synopsis: str | None = None

    def as_display(self) -> str:
        """Render the record as a single human-readable line."""
        return (
            f"ID: {self.id}, Title: {self.title}, Author: {self.author}, "
            f"Publisher: {self.publisher}, Year: {self.publication_year}, "
            f"Synopsis: {_display(self.synopsis)}"
        )

    def as_list_item(self) -> str:
        """Render the record as semicolon-separated fields.

        Display only. A field containing ';' makes the result ambiguous, so
        never parse this back into a Book; pass the Book itself instead.
        """
        fields = (
            self.id,
            self.title,
            self.author,
            self.publisher,
            self.publication_year,
            self.synopsis,
        )
        return ";".join(_display(value) for value in fields)


def format_books(books: Iterable[Book]) -> str:
    """Render records one per line, each line newline-terminated."""
    return "".join(f"{book.as_display()}\n" for book in books)


def book_to_params(book: Book) -> tuple[Any, ...]:
    """Convert a Book to INSERT parameters in BOOK_COLUMNS order."""
    return (
        book.id,
        book.title,
        book.author,
        book.publisher,
        book.publication_year,
        normalize_synopsis(book.synopsis),
    )


def row_to_book(row: Any) -> Book:
    """Convert a database row (sqlite3.Row or mapping) to a Book."""
    return Book(
        id=row["ID"],
        title=row["TITLE"],
        author=row["AUTHOR"],
        publisher=row["PUBLISHER"],
        publication_year=row["PUBLICATION_YEAR"],
        synopsis=row["SYNOPSIS"],
    )
