# ABOUTME: The `booksdb ls` command for listing every book in the catalog.
# ABOUTME: Displays a Rich table, or the plain one-line-per-book rendering.

from pathlib import Path

import click
from rich.console import Console

from booksdb.cli.options import data_option, plain_option, schema_option
from booksdb.cli.render import print_books
from booksdb.cli.session import fail, load_store
from booksdb.db import BookStoreError

console = Console()


@click.command("ls")
@data_option
@schema_option
@plain_option
def ls(data_path: Path | None, schema_path: Path | None, plain: bool) -> None:
    """List all books in the catalog."""
    with load_store(console, data_path, schema_path) as store:
        try:
            books = store.all_books()
        except BookStoreError as exc:
            fail(console, str(exc), exc)

    if not books:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    print_books(console, books, plain=plain)
