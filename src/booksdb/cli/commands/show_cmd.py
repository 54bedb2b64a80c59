# ABOUTME: The `booksdb show` command for displaying one book in full.
# ABOUTME: Shows every field, including the synopsis, for a single id.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from booksdb.cli.options import data_option, schema_option
from booksdb.cli.session import fail, load_store
from booksdb.db import BookStoreError

console = Console()


@click.command("show")
@click.argument("book_id", type=int)
@data_option
@schema_option
def show(book_id: int, data_path: Path | None, schema_path: Path | None) -> None:
    """Show every field of a book by ID."""
    with load_store(console, data_path, schema_path) as store:
        try:
            book = store.get_by_id(book_id)
        except BookStoreError as exc:
            fail(console, str(exc), exc)

    if book is None:
        fail(console, f"Book {book_id} not found.")

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", escape(book.title))
    table.add_row("Author", escape(book.author))
    table.add_row("Publisher", escape(book.publisher))
    table.add_row("Year", str(book.publication_year))
    table.add_row("Synopsis", escape(book.synopsis) if book.synopsis else "[dim]none[/dim]")

    console.print(table)
