# ABOUTME: CLI package for booksdb, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from booksdb.cli.commands import (
    add_cmd,
    export_cmd,
    find_cmd,
    ls_cmd,
    query_cmd,
    rm_cmd,
    show_cmd,
    update_cmd,
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="booksdb")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """booksdb - a small book catalog kept in an in-memory database."""
    _configure_logging(verbose)


cli.add_command(ls_cmd.ls)
cli.add_command(find_cmd.find)
cli.add_command(show_cmd.show)
cli.add_command(add_cmd.add)
cli.add_command(update_cmd.update)
cli.add_command(rm_cmd.rm)
cli.add_command(query_cmd.query)
cli.add_command(export_cmd.export)
