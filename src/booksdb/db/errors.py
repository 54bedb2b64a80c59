# ABOUTME: Exception hierarchy for the booksdb persistence layer.
# ABOUTME: Each failure class (connection, script, statement, export) is distinguishable.

from pathlib import Path


class BookStoreError(Exception):
    """Base class for every error raised by the book store."""


class StoreConnectionError(BookStoreError):
    """Raised when the in-memory database cannot be opened or closed."""


class StoreNotReadyError(StoreConnectionError):
    """Raised when an operation runs on a store that has not been initialized."""


class InitializationError(BookStoreError):
    """Raised when the store cannot be (re)initialized."""


class ScriptError(InitializationError):
    """Raised when a schema or data script is missing, unreadable, or invalid."""

    def __init__(self, path: Path | None, message: str) -> None:
        self.path = path
        where = str(path) if path is not None else "built-in schema"
        super().__init__(f"{where}: {message}")


class StatementError(BookStoreError):
    """Raised when the engine rejects a statement (bad SQL, type mismatch, constraint)."""


class DuplicateBookError(StatementError):
    """Raised when attempting to add a book with an id that already exists."""

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"Book with id {book_id} already exists")


class ExportError(BookStoreError):
    """Raised when the export destination cannot be created or written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
