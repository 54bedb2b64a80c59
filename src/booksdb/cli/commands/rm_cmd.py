# ABOUTME: The `booksdb rm` command for deleting a book by id.
# ABOUTME: Deleting an id that does not exist is reported but is not an error.

from pathlib import Path

import click
from rich.console import Console

from booksdb.cli.options import data_option, output_option, schema_option
from booksdb.cli.session import fail, load_store, save_store
from booksdb.db import BookStoreError

console = Console()


@click.command("rm")
@click.argument("book_id", metavar="ID", type=int)
@data_option
@schema_option
@output_option
def rm(
    book_id: int,
    data_path: Path | None,
    schema_path: Path | None,
    output_path: Path | None,
) -> None:
    """Delete a book by ID."""
    with load_store(console, data_path, schema_path) as store:
        try:
            deleted = store.delete_book(book_id)
        except BookStoreError as exc:
            fail(console, f"Failed to delete book: {exc}", exc)

        if not deleted:
            console.print(f"[yellow]No book with id {book_id}; nothing deleted.[/yellow]")
            return

        console.print(f"Removed book {book_id}.")
        save_store(console, store, data_path, output_path)
