# ABOUTME: BookStore, the handle that owns one in-memory BOOKS database.
# ABOUTME: Lifecycle (initialize/close), CRUD, exact-match search, raw queries and export.

import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from booksdb.db.connection import connect_memory
from booksdb.db.dump import dump_books
from booksdb.db.errors import (
    DuplicateBookError,
    StatementError,
    StoreConnectionError,
    StoreNotReadyError,
)
from booksdb.db.mapping import Book, book_to_params, normalize_synopsis, row_to_book
from booksdb.db.schema import BOOK_COLUMNS, DEFAULT_DATA_SCRIPT, SEARCH_FIELDS


@dataclass
class QueryResult:
    """Rows from a raw query whose columns are not a full BOOKS row."""

    columns: list[str] = field(default_factory=list)
    rows: list[tuple[Any, ...]] = field(default_factory=list)
    rowcount: int = 0


class BookStore:
    """Owns one in-memory SQLite database holding the BOOKS table.

    A store starts uninitialized. initialize() builds a database from the
    schema script and a data script and makes the store ready; calling it
    again replaces the whole database. The store does no locking: callers
    using it from several threads must serialize access themselves.
    """

    def __init__(self, schema_script: Path | None = None) -> None:
        self._schema_script = schema_script
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> "BookStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_ready(self) -> bool:
        """Whether the store holds an open database."""
        return self._conn is not None

    @property
    def total_changes(self) -> int:
        """Rows inserted, updated or deleted since the database was built."""
        return self._require_conn().total_changes

    def initialize(self, data_script: Path = DEFAULT_DATA_SCRIPT) -> None:
        """Replace the store's contents with a database built from data_script.

        The new database is built completely before the current one is
        closed. If loading fails the previous database stays in place and
        the store remains in whatever state it was in before the call.

        Raises:
            ScriptError: If a script is unreadable or contains an invalid statement.
            StoreConnectionError: If the new database cannot be opened.
        """
        new_conn = connect_memory(data_script, self._schema_script)
        old_conn, self._conn = self._conn, new_conn
        if old_conn is not None:
            _close_connection(old_conn)

    def close(self) -> None:
        """Close the database and return to the uninitialized state. Idempotent."""
        conn, self._conn = self._conn, None
        if conn is not None:
            _close_connection(conn)

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreNotReadyError("Book store has not been initialized")
        return self._conn

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        conn = self._require_conn()
        try:
            return conn.execute(sql, params)
        except (sqlite3.Error, OverflowError) as exc:
            conn.rollback()
            raise StatementError(str(exc)) from exc

    def _write(self, sql: str, params: tuple[Any, ...]) -> int:
        cursor = self._execute(sql, params)
        self._require_conn().commit()
        return cursor.rowcount

    def add_book(self, book: Book) -> None:
        """Insert a new record. An empty synopsis is stored as NULL.

        Raises:
            DuplicateBookError: If a book with this id already exists.
            StatementError: If the engine rejects the row for any other reason.
        """
        placeholders = ", ".join("?" for _ in BOOK_COLUMNS)
        try:
            self._write(
                f"INSERT INTO BOOKS ({', '.join(BOOK_COLUMNS)}) VALUES ({placeholders})",
                book_to_params(book),
            )
        except StatementError as exc:
            cause = exc.__cause__
            if isinstance(cause, sqlite3.IntegrityError) and "UNIQUE constraint failed" in str(
                cause
            ):
                raise DuplicateBookError(book.id) from cause
            raise

    def update_book(self, book: Book) -> int:
        """Replace every field except the id of the record with book.id.

        An empty synopsis clears the stored one. A missing id is not an
        error; it simply affects no rows.

        Returns:
            The number of rows updated (0 or 1).
        """
        return self._write(
            "UPDATE BOOKS SET TITLE = ?, AUTHOR = ?, PUBLISHER = ?, "
            "PUBLICATION_YEAR = ?, SYNOPSIS = ? WHERE ID = ?",
            (
                book.title,
                book.author,
                book.publisher,
                book.publication_year,
                normalize_synopsis(book.synopsis),
                book.id,
            ),
        )

    def delete_book(self, book_id: int) -> int:
        """Delete the record with book_id. Returns the rows deleted (0 or 1)."""
        return self._write("DELETE FROM BOOKS WHERE ID = ?", (book_id,))

    def get_by_id(self, book_id: int) -> Book | None:
        """Retrieve a book by its id."""
        row = self._execute("SELECT * FROM BOOKS WHERE ID = ?", (book_id,)).fetchone()
        return row_to_book(row) if row else None

    def find_by(self, field_name: str, value: str | int) -> list[Book]:
        """Return books whose field equals value exactly.

        Args:
            field_name: One of "title", "author", "publisher" or "year".
            value: The value to match. No case folding or partial matching.

        Raises:
            ValueError: If field_name is not a searchable field.
        """
        try:
            column = SEARCH_FIELDS[field_name]
        except KeyError:
            choices = ", ".join(SEARCH_FIELDS)
            raise ValueError(f"Unknown field '{field_name}' (expected one of: {choices})") from None

        cursor = self._execute(f"SELECT * FROM BOOKS WHERE {column} = ?", (value,))
        return [row_to_book(row) for row in cursor.fetchall()]

    def all_books(self) -> list[Book]:
        """Return every book, in the engine's natural order."""
        cursor = self._execute("SELECT * FROM BOOKS")
        return [row_to_book(row) for row in cursor.fetchall()]

    def raw_query(self, sql: str) -> list[Book] | QueryResult:
        """Run one caller-supplied SQL statement verbatim. TRUSTED INPUT ONLY.

        Nothing is sanitized and no statement type is refused: DDL and
        destructive DML run and are committed. This is intended for a
        single trusted user; never route untrusted input here.

        Returns:
            A list of Books when the result has every BOOKS column, otherwise
            a QueryResult. Statements without a result set return a
            QueryResult with no columns and the affected row count.

        Raises:
            StatementError: If the engine rejects the statement.
        """
        conn = self._require_conn()
        try:
            cursor = conn.execute(sql)
            rows = cursor.fetchall()
            conn.commit()
        except (sqlite3.Error, sqlite3.Warning, OverflowError) as exc:
            conn.rollback()
            raise StatementError(str(exc)) from exc

        if cursor.description is None:
            return QueryResult(rowcount=cursor.rowcount)

        columns = [col[0] for col in cursor.description]
        if {c.upper() for c in columns} >= set(BOOK_COLUMNS):
            return [row_to_book(row) for row in rows]
        return QueryResult(columns=columns, rows=[tuple(row) for row in rows], rowcount=len(rows))

    def export_to(self, destination: Path) -> int:
        """Dump every record as INSERT statements. Returns the records written.

        Raises:
            ExportError: If the destination cannot be created or written.
        """
        return dump_books(self.all_books(), destination)


def _close_connection(conn: sqlite3.Connection) -> None:
    try:
        conn.close()
    except sqlite3.Error as exc:
        raise StoreConnectionError(f"cannot close database: {exc}") from exc


def open_store(
    data_script: Path | None = None,
    schema_script: Path | None = None,
) -> BookStore:
    """Create a BookStore and initialize it.

    Args:
        data_script: Data script to load. Defaults to the bundled seed data.
        schema_script: Schema script. Defaults to the built-in BOOKS DDL.
    """
    store = BookStore(schema_script)
    store.initialize(data_script or DEFAULT_DATA_SCRIPT)
    return store
