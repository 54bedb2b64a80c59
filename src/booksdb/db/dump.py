# ABOUTME: Serializes Book records as a reloadable script of INSERT statements.
# ABOUTME: Quotes are doubled; a null synopsis drops the SYNOPSIS column from its row.

from collections.abc import Iterable
from pathlib import Path

from booksdb.db.errors import ExportError
from booksdb.db.mapping import Book


def quote_text(value: str) -> str:
    """Wrap a value in single quotes, doubling any embedded quote."""
    return "'" + value.replace("'", "''") + "'"


def number_literal(value: object) -> str:
    """Render an INTEGER column value; anything that is not an int is quoted as text."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return quote_text(str(value))


def insert_statement(book: Book) -> str:
    """Build the INSERT statement that recreates a single record.

    The column list depends on the record: SYNOPSIS is listed only when the
    record has one, so a reload leaves it NULL rather than an empty string.
    """
    columns = ["ID", "TITLE", "AUTHOR", "PUBLISHER", "PUBLICATION_YEAR"]
    values = [
        number_literal(book.id),
        quote_text(book.title),
        quote_text(book.author),
        quote_text(book.publisher),
        number_literal(book.publication_year),
    ]
    if book.synopsis is not None:
        columns.append("SYNOPSIS")
        values.append(quote_text(book.synopsis))

    return f"INSERT INTO BOOKS ({', '.join(columns)}) VALUES ({', '.join(values)});"


def dump_books(books: Iterable[Book], destination: Path) -> int:
    """Write one INSERT statement per record to destination.

    Creates parent directories as needed. The write is not atomic: a failure
    part way through leaves a truncated file behind.

    Returns:
        The number of records written.

    Raises:
        ExportError: If the destination cannot be created or written.
    """
    count = 0
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8", newline="\n") as fh:
            for book in books:
                fh.write(insert_statement(book) + "\n")
                count += 1
    except OSError as exc:
        raise ExportError(destination, f"cannot write export: {exc}") from exc
    return count
