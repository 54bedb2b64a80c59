# ABOUTME: The `booksdb add` command for inserting a new book.
# ABOUTME: Ids are supplied by the caller; a reused id is reported, not overwritten.

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booksdb.cli.options import data_option, output_option, schema_option
from booksdb.cli.session import fail, load_store, save_store
from booksdb.db import Book, BookStoreError, DuplicateBookError

logger = logging.getLogger(__name__)

console = Console()


@click.command("add")
@click.argument("book_id", metavar="ID", type=int)
@click.argument("title")
@click.argument("author")
@click.argument("publisher")
@click.argument("year", type=int)
@click.option("--synopsis", default=None, help="Optional synopsis.")
@data_option
@schema_option
@output_option
def add(
    book_id: int,
    title: str,
    author: str,
    publisher: str,
    year: int,
    synopsis: str | None,
    data_path: Path | None,
    schema_path: Path | None,
    output_path: Path | None,
) -> None:
    """Add a book to the catalog."""
    book = Book(
        id=book_id,
        title=title.strip(),
        author=author.strip(),
        publisher=publisher.strip(),
        publication_year=year,
        synopsis=synopsis.strip() if synopsis is not None else None,
    )

    with load_store(console, data_path, schema_path) as store:
        try:
            store.add_book(book)
        except DuplicateBookError as exc:
            fail(console, f"Failed to add book: id {exc.book_id} is already taken.", exc)
        except BookStoreError as exc:
            fail(console, f"Failed to add book: {exc}", exc)

        logger.debug("Added book %d", book.id)
        console.print(f"Added [bold]{escape(book.title)}[/bold] (id {book.id}).")
        save_store(console, store, data_path, output_path)
