# ABOUTME: Loading and saving the in-memory catalog around a single CLI command.
# ABOUTME: Turns store errors into red messages and a non-zero exit status.

import logging
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from booksdb.db import BookStore, BookStoreError, open_store

logger = logging.getLogger(__name__)


def fail(console: Console, message: str, exc: BaseException | None = None) -> NoReturn:
    """Print an error message and exit with status 1."""
    console.print(f"[red]{escape(message)}[/red]")
    if exc is not None:
        raise SystemExit(1) from exc
    raise SystemExit(1)


def load_store(console: Console, data_path: Path | None, schema_path: Path | None) -> BookStore:
    """Build the in-memory catalog from the configured scripts, or exit."""
    try:
        store = open_store(data_path, schema_path)
    except BookStoreError as exc:
        fail(console, f"Failed to load the catalog: {exc}", exc)
    logger.debug("Catalog loaded from %s", data_path or "bundled seed data")
    return store


def save_store(
    console: Console,
    store: BookStore,
    data_path: Path | None,
    output_path: Path | None,
) -> None:
    """Export the catalog to --output, else back to --data, else warn it is discarded."""
    target = output_path or data_path
    if target is None:
        console.print(
            "[dim]No --data or --output file given; the change was not saved.[/dim]"
        )
        return

    try:
        count = store.export_to(target)
    except BookStoreError as exc:
        fail(console, f"Error saving the catalog: {exc}", exc)
    logger.debug("Exported %d book(s) to %s", count, target)
    console.print(f"[dim]Saved {count} book(s) to {escape(str(target))}[/dim]")
