# ABOUTME: The `booksdb update` command for replacing fields of an existing book.
# ABOUTME: Unspecified fields keep their current value; an empty synopsis clears it.

import logging
from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booksdb.cli.options import data_option, output_option, schema_option
from booksdb.cli.session import fail, load_store, save_store
from booksdb.db import BookStoreError

logger = logging.getLogger(__name__)

console = Console()


@click.command("update")
@click.argument("book_id", metavar="ID", type=int)
@click.option("--title", default=None, help="New title.")
@click.option("--author", default=None, help="New author.")
@click.option("--publisher", default=None, help="New publisher.")
@click.option("--year", type=int, default=None, help="New publication year.")
@click.option("--synopsis", default=None, help="New synopsis; pass '' to clear it.")
@data_option
@schema_option
@output_option
def update(
    book_id: int,
    title: str | None,
    author: str | None,
    publisher: str | None,
    year: int | None,
    synopsis: str | None,
    data_path: Path | None,
    schema_path: Path | None,
    output_path: Path | None,
) -> None:
    """Update a book's fields by ID."""
    with load_store(console, data_path, schema_path) as store:
        try:
            current = store.get_by_id(book_id)
        except BookStoreError as exc:
            fail(console, str(exc), exc)

        if current is None:
            console.print(f"[yellow]No book with id {book_id}; nothing updated.[/yellow]")
            return

        changes: dict[str, str | int] = {}
        if title is not None:
            changes["title"] = title.strip()
        if author is not None:
            changes["author"] = author.strip()
        if publisher is not None:
            changes["publisher"] = publisher.strip()
        if year is not None:
            changes["publication_year"] = year
        if synopsis is not None:
            changes["synopsis"] = synopsis.strip()

        if not changes:
            console.print("[yellow]No changes given.[/yellow]")
            return

        updated = replace(current, **changes)
        try:
            store.update_book(updated)
        except BookStoreError as exc:
            fail(console, f"Failed to update book: {exc}", exc)

        logger.debug("Updated book %d: %s", book_id, ", ".join(changes))
        console.print(f"Updated [bold]{escape(updated.title)}[/bold] (id {book_id}).")
        save_store(console, store, data_path, output_path)
