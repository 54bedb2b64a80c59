# ABOUTME: The `booksdb export` command for dumping the catalog to a data script.
# ABOUTME: The output reloads with --data to reproduce the same set of books.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booksdb.cli.options import data_option, schema_option
from booksdb.cli.session import fail, load_store
from booksdb.db import BookStoreError

console = Console()


@click.command("export")
@click.argument("destination", type=click.Path(dir_okay=False, path_type=Path))
@data_option
@schema_option
def export(destination: Path, data_path: Path | None, schema_path: Path | None) -> None:
    """Save the catalog to DESTINATION as INSERT statements."""
    with load_store(console, data_path, schema_path) as store:
        try:
            count = store.export_to(destination)
        except BookStoreError as exc:
            fail(console, f"Error saving the catalog to {destination}: {exc}", exc)

    console.print(f"Exported {count} book(s) to [bold]{escape(str(destination))}[/bold].")
