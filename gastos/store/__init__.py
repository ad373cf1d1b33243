"""Store layer - provides persistence for the application.

This module re-exports the public store classes and functions for easy importing.
"""

from gastos.store.kv import CATEGORIES_KEY, EXPENSES_KEY, KeyValueStore, MemoryStore, SqliteStore
from gastos.store.ledger import Ledger
from gastos.store.schema import database_exists, get_db_path, init_database
from gastos.store.taxonomy import Taxonomy

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Adapters
    "CATEGORIES_KEY",
    "EXPENSES_KEY",
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
    # Stateful collections
    "Ledger",
    "Taxonomy",
]
