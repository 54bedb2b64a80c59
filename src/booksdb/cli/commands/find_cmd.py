# ABOUTME: The `booksdb find` command for exact-match search on one field.
# ABOUTME: Searches by title, author, publisher, or publication year.

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from booksdb.cli.options import data_option, plain_option, schema_option
from booksdb.cli.render import print_books
from booksdb.cli.session import fail, load_store
from booksdb.db import SEARCH_FIELDS, BookStoreError

logger = logging.getLogger(__name__)

console = Console()


@click.command("find")
@click.argument("field_name", metavar="FIELD", type=click.Choice(list(SEARCH_FIELDS)))
@click.argument("value")
@data_option
@schema_option
@plain_option
def find(
    field_name: str,
    value: str,
    data_path: Path | None,
    schema_path: Path | None,
    plain: bool,
) -> None:
    """Find books whose FIELD equals VALUE exactly (case-sensitive)."""
    value = value.strip()
    query_value: str | int = value
    if field_name == "year":
        try:
            query_value = int(value)
        except ValueError as exc:
            raise click.BadParameter(
                f"'{value}' is not a valid year.", param_hint="VALUE"
            ) from exc

    with load_store(console, data_path, schema_path) as store:
        try:
            results = store.find_by(field_name, query_value)
        except BookStoreError as exc:
            fail(console, str(exc), exc)

    logger.debug("Searched for %s=%r: %d result(s)", field_name, query_value, len(results))
    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(f"[dim]Searched for {field_name}={escape(value)}[/dim]")
    print_books(console, results, plain=plain)
