# ABOUTME: SQL DDL and column constants for the booksdb BOOKS table.
# ABOUTME: Also locates the bundled seed data script loaded by default.

from pathlib import Path

SCHEMA_SQL = """
-- Single flat book catalog table; ids are supplied by the caller
CREATE TABLE BOOKS (
    ID               INTEGER PRIMARY KEY,
    TITLE            VARCHAR(255) NOT NULL,
    AUTHOR           VARCHAR(255) NOT NULL,
    PUBLISHER        VARCHAR(255) NOT NULL,
    PUBLICATION_YEAR INTEGER NOT NULL,
    SYNOPSIS         TEXT
);
"""

BOOK_COLUMNS = ("ID", "TITLE", "AUTHOR", "PUBLISHER", "PUBLICATION_YEAR", "SYNOPSIS")

# Field names accepted by BookStore.find_by, mapped to their column
SEARCH_FIELDS = {
    "title": "TITLE",
    "author": "AUTHOR",
    "publisher": "PUBLISHER",
    "year": "PUBLICATION_YEAR",
}

DEFAULT_DATA_SCRIPT = Path(__file__).resolve().parent / "default.sql"
