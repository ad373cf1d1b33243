"""Tests for gastos.store.kv adapters."""

import sqlite3

from gastos.store.kv import MemoryStore, SqliteStore
from gastos.store.schema import database_exists, init_database


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_load_and_save(self) -> None:
        """Should return saved text and None for missing keys."""
        store = MemoryStore()

        assert store.load("expenses") is None
        assert store.save("expenses", "[]")
        assert store.load("expenses") == "[]"


class TestSqliteStore:
    """Tests for SqliteStore."""

    def test_round_trip(self, tmp_path) -> None:
        """Should store and overwrite values by key."""
        store = SqliteStore(tmp_path / "gastos.db")
        store.initialize()

        assert store.save("expenses", "[1]")
        assert store.save("expenses", "[1, 2]")
        assert store.save("customCategories", '["Gym"]')

        assert store.load("expenses") == "[1, 2]"
        assert store.load("customCategories") == '["Gym"]'
        assert store.load("missing") is None

    def test_missing_database_loads_nothing(self, tmp_path) -> None:
        """Should report absent data without creating the file."""
        db_path = tmp_path / "nope.db"
        store = SqliteStore(db_path)

        assert store.load("expenses") is None
        assert not database_exists(db_path)

    def test_save_without_table_fails(self, tmp_path) -> None:
        """Should report failure instead of raising."""
        db_path = tmp_path / "empty.db"
        sqlite3.connect(db_path).close()

        assert SqliteStore(db_path).save("expenses", "[]") is False

    def test_unreadable_table_loads_nothing(self, tmp_path) -> None:
        """Should treat read errors as absent data."""
        db_path = tmp_path / "empty.db"
        sqlite3.connect(db_path).close()

        assert SqliteStore(db_path).load("expenses") is None

    def test_init_is_idempotent(self, tmp_path) -> None:
        """Should keep data when initialized twice."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)
        store = SqliteStore(db_path)
        store.save("expenses", "[]")

        init_database(db_path)

        assert store.load("expenses") == "[]"
