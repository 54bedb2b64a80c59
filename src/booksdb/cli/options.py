# ABOUTME: Shared Click options for booksdb CLI commands.
# ABOUTME: Provides reusable decorators for --data, --schema, --output and --plain.

from pathlib import Path

import click

from booksdb.db.schema import DEFAULT_DATA_SCRIPT

data_option = click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="BOOKSDB_DATA",
    help=f"Data script to load the catalog from (default: {DEFAULT_DATA_SCRIPT.name} seed).",
)

schema_option = click.option(
    "--schema",
    "schema_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="BOOKSDB_SCHEMA",
    help="Schema script creating the BOOKS table (default: built-in).",
)

output_option = click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to save the catalog after the change (default: the --data file).",
)

plain_option = click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Print one 'ID: ..., Title: ...' line per book instead of a table.",
)
