# ABOUTME: Shared pytest fixtures for booksdb tests.
# ABOUTME: Provides seed data scripts on disk and a ready BookStore built from them.

from collections.abc import Iterator
from pathlib import Path

import pytest

from booksdb.db import Book, BookStore

DUNE = Book(1, "Dune", "Herbert", "Ace", 1965, "desert planet")
ROSE = Book(2, "The Name of the Rose", "Eco", "Harcourt", 1980, "A medieval mystery.")
POLICEMAN = Book(3, "The Third Policeman", "O'Brien", "MacGibbon", 1967, None)

SEED_BOOKS = {DUNE, ROSE, POLICEMAN}

DUNE_SQL = (
    "INSERT INTO BOOKS (ID, TITLE, AUTHOR, PUBLISHER, PUBLICATION_YEAR, SYNOPSIS) "
    "VALUES (1, 'Dune', 'Herbert', 'Ace', 1965, 'desert planet');\n"
)

SEED_SQL = (
    DUNE_SQL
    + "INSERT INTO BOOKS (ID, TITLE, AUTHOR, PUBLISHER, PUBLICATION_YEAR, SYNOPSIS) "
    "VALUES (2, 'The Name of the Rose', 'Eco', 'Harcourt', 1980, 'A medieval mystery.');\n"
    "INSERT INTO BOOKS (ID, TITLE, AUTHOR, PUBLISHER, PUBLICATION_YEAR) "
    "VALUES (3, 'The Third Policeman', 'O''Brien', 'MacGibbon', 1967);\n"
)


@pytest.fixture
def seed_script(tmp_path: Path) -> Path:
    """A data script holding three books, one without a synopsis."""
    path = tmp_path / "seed.sql"
    path.write_text(SEED_SQL, encoding="utf-8")
    return path


@pytest.fixture
def dune_script(tmp_path: Path) -> Path:
    """A data script holding only Dune."""
    path = tmp_path / "dune.sql"
    path.write_text(DUNE_SQL, encoding="utf-8")
    return path


@pytest.fixture
def empty_script(tmp_path: Path) -> Path:
    """A data script with no statements."""
    path = tmp_path / "empty.sql"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def store(seed_script: Path) -> Iterator[BookStore]:
    """A BookStore initialized from the three-book seed script."""
    with BookStore() as book_store:
        book_store.initialize(seed_script)
        yield book_store


@pytest.fixture
def empty_store(empty_script: Path) -> Iterator[BookStore]:
    """A ready BookStore with an empty BOOKS table."""
    with BookStore() as book_store:
        book_store.initialize(empty_script)
        yield book_store


@pytest.fixture
def seed_books() -> set[Book]:
    """The records loaded by seed_script."""
    return set(SEED_BOOKS)
