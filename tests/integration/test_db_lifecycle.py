# ABOUTME: Integration tests for the BookStore lifecycle: initialize, reload, close.
# ABOUTME: Validates that reinitializing is a full reset and that a failed reload keeps the old data.

from pathlib import Path

import pytest

from booksdb.db import (
    DEFAULT_DATA_SCRIPT,
    Book,
    BookStore,
    ScriptError,
    open_store,
)

DUNE = Book(1, "Dune", "Herbert", "Ace", 1965, "desert planet")


class TestStoreLifecycle:
    """Integration tests for initialize/reinitialize/close."""

    def test_dune_scenario(self, dune_script: Path) -> None:
        """Seeded Dune is found by author, Tolkien is not, and deletion empties the store."""
        with open_store(dune_script) as store:
            assert store.find_by("author", "Herbert") == [DUNE]
            assert store.find_by("author", "Tolkien") == []
            store.delete_book(1)
            assert store.all_books() == []

    def test_reinitialize_is_full_reset(self, seed_script: Path, dune_script: Path) -> None:
        """Reloading replaces every record instead of merging."""
        with open_store(seed_script) as store:
            store.add_book(Book(50, "Extra", "Someone", "Nobody", 2020))
            store.initialize(dune_script)
            assert store.all_books() == [DUNE]

    def test_reinitialize_same_script_discards_edits(self, seed_script: Path) -> None:
        """Unsaved edits are lost when the same script is loaded again."""
        with open_store(seed_script) as store:
            store.delete_book(1)
            store.initialize(seed_script)
            assert store.get_by_id(1) == DUNE

    def test_failed_reload_keeps_previous_store(
        self, seed_script: Path, tmp_path: Path, seed_books: set[Book]
    ) -> None:
        """A reload that fails leaves the previous database ready and unchanged."""
        bad = tmp_path / "bad.sql"
        bad.write_text(
            "INSERT INTO BOOKS VALUES (9, 'A', 'B', 'C', 2000, NULL);\nNOT SQL AT ALL;\n",
            encoding="utf-8",
        )
        with open_store(seed_script) as store:
            with pytest.raises(ScriptError):
                store.initialize(bad)
            assert store.is_ready
            assert set(store.all_books()) == seed_books

    def test_failed_first_initialize_stays_uninitialized(self, tmp_path: Path) -> None:
        """A store whose first load fails is still not ready."""
        store = BookStore()
        with pytest.raises(ScriptError):
            store.initialize(tmp_path / "missing.sql")
        assert not store.is_ready

    def test_separate_stores_are_isolated(self, seed_script: Path) -> None:
        """Two stores built from the same script do not see each other's writes."""
        with open_store(seed_script) as first, open_store(seed_script) as second:
            first.delete_book(1)
            assert second.get_by_id(1) == DUNE

    def test_context_manager_closes(self, seed_script: Path) -> None:
        """Leaving the with block closes the store."""
        with open_store(seed_script) as store:
            assert store.is_ready
        assert not store.is_ready

    def test_default_seed(self) -> None:
        """open_store() with no arguments loads the bundled seed data."""
        with open_store() as store:
            assert store.all_books()
        with open_store(DEFAULT_DATA_SCRIPT) as store:
            assert store.find_by("author", "Frank Herbert")

    def test_custom_schema(self, tmp_path: Path, dune_script: Path) -> None:
        """A BookStore can be built against a schema script on disk."""
        schema = tmp_path / "schema.sql"
        schema.write_text(
            "CREATE TABLE BOOKS (ID INTEGER PRIMARY KEY, TITLE TEXT NOT NULL, "
            "AUTHOR TEXT NOT NULL, PUBLISHER TEXT NOT NULL, "
            "PUBLICATION_YEAR INTEGER NOT NULL, SYNOPSIS TEXT);\n",
            encoding="utf-8",
        )
        with open_store(dune_script, schema) as store:
            assert store.all_books() == [DUNE]
