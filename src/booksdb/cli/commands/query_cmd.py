# ABOUTME: The `booksdb query` command for running arbitrary SQL against the catalog.
# ABOUTME: Trusted, single-user escape hatch: statements run verbatim and unsanitized.

from pathlib import Path

import click
from rich.console import Console

from booksdb.cli.options import data_option, output_option, plain_option, schema_option
from booksdb.cli.render import print_books, print_query_result
from booksdb.cli.session import fail, load_store, save_store
from booksdb.db import BookStoreError, QueryResult

console = Console()


@click.command("query")
@click.argument("sql")
@data_option
@schema_option
@output_option
@plain_option
def query(
    sql: str,
    data_path: Path | None,
    schema_path: Path | None,
    output_path: Path | None,
    plain: bool,
) -> None:
    """Run one raw SQL statement, e.g. "SELECT * FROM BOOKS".

    UNSAFE: the statement is executed as given, including DDL and
    destructive DML. Statements that change data are saved like any
    other edit.
    """
    sql = sql.strip()
    if not sql:
        raise click.BadParameter("empty query.", param_hint="SQL")

    with load_store(console, data_path, schema_path) as store:
        changes_before = store.total_changes
        try:
            result = store.raw_query(sql)
        except BookStoreError as exc:
            fail(console, f"Query failed: {exc}", exc)

        if isinstance(result, QueryResult):
            print_query_result(console, result)
        elif result:
            print_books(console, result, plain=plain)
        else:
            console.print("[yellow]No results found.[/yellow]")

        if store.total_changes != changes_before:
            save_store(console, store, data_path, output_path)
