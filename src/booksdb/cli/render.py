# ABOUTME: Rich rendering of Book records and raw query results.
# ABOUTME: Shared by the listing, search and query commands.

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from booksdb.db import Book, QueryResult, format_books


def print_books(console: Console, books: list[Book], *, plain: bool = False) -> None:
    """Print books as a table, or as 'ID: ..., Title: ...' lines when plain."""
    if plain:
        console.out(format_books(books), end="", highlight=False)
        return

    table = Table()
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Publisher")
    table.add_column("Year", justify="right")

    for book in books:
        table.add_row(
            str(book.id),
            escape(book.title),
            escape(book.author),
            escape(book.publisher),
            str(book.publication_year),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")


def print_query_result(console: Console, result: QueryResult) -> None:
    """Print an arbitrary result set, or the affected row count when there is none."""
    if not result.columns:
        console.print(f"Statement executed; {max(result.rowcount, 0)} row(s) affected.")
        return

    table = Table()
    for column in result.columns:
        table.add_column(escape(column))
    for row in result.rows:
        table.add_row(*("NULL" if value is None else escape(str(value)) for value in row))

    console.print(table)
    console.print(f"\n[dim]{len(result.rows)} row(s)[/dim]")
