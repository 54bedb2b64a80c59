# ABOUTME: Public API for the booksdb persistence layer.
# ABOUTME: Exports the store handle, the Book record type, errors and defaults.

from booksdb.db.errors import (
    BookStoreError,
    DuplicateBookError,
    ExportError,
    InitializationError,
    ScriptError,
    StatementError,
    StoreConnectionError,
    StoreNotReadyError,
)
from booksdb.db.mapping import Book, format_books
from booksdb.db.schema import DEFAULT_DATA_SCRIPT, SEARCH_FIELDS
from booksdb.db.store import BookStore, QueryResult, open_store

__all__ = [
    "DEFAULT_DATA_SCRIPT",
    "SEARCH_FIELDS",
    "Book",
    "BookStore",
    "BookStoreError",
    "DuplicateBookError",
    "ExportError",
    "InitializationError",
    "QueryResult",
    "ScriptError",
    "StatementError",
    "StoreConnectionError",
    "StoreNotReadyError",
    "format_books",
    "open_store",
]
