# ABOUTME: In-memory SQLite connection factory for the booksdb store.
# ABOUTME: Builds a fresh database by running a schema script and a data script.

import sqlite3
from pathlib import Path

from booksdb.db.errors import ScriptError, StoreConnectionError
from booksdb.db.schema import SCHEMA_SQL


def read_script(path: Path) -> str:
    """Read a SQL script as UTF-8 text.

    Raises:
        ScriptError: If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptError(path, f"cannot read script: {exc}") from exc


def _run_script(conn: sqlite3.Connection, sql: str, path: Path | None) -> None:
    try:
        conn.executescript(sql)
    except sqlite3.Error as exc:
        raise ScriptError(path, f"invalid statement: {exc}") from exc


def connect_memory(
    data_script: Path,
    schema_script: Path | None = None,
) -> sqlite3.Connection:
    """Create a private in-memory database loaded from the given scripts.

    Both scripts are read before any connection is opened. The schema script
    runs first, then the data script. Every call yields an independent
    database. On failure the new connection is closed and nothing leaks.

    Args:
        data_script: Script of INSERT statements (or a full dump) to load.
        schema_script: DDL script. Defaults to the built-in BOOKS schema.

    Returns:
        A configured sqlite3.Connection with sqlite3.Row as row factory.

    Raises:
        ScriptError: If either script is unreadable or has an invalid statement.
        StoreConnectionError: If SQLite cannot open the in-memory database.
    """
    schema_sql = read_script(schema_script) if schema_script else SCHEMA_SQL
    data_sql = read_script(data_script)

    try:
        conn = sqlite3.connect(":memory:")
    except sqlite3.Error as exc:
        raise StoreConnectionError(f"cannot open in-memory database: {exc}") from exc
    conn.row_factory = sqlite3.Row

    try:
        _run_script(conn, schema_sql, schema_script)
        _run_script(conn, data_sql, data_script)
    except ScriptError:
        conn.close()
        raise

    return conn
