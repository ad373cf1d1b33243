"""Key-value persistence adapters.

The ledger and the taxonomy each own one key and store their whole state as
text under it. Adapters report failures through their return values instead of
raising, so callers decide how to surface them.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

from gastos.store.schema import get_db_path, init_database

logger = logging.getLogger(__name__)

EXPENSES_KEY = "expenses"
CATEGORIES_KEY = "customCategories"


class KeyValueStore(Protocol):
    """Durable text storage addressed by key."""

    def load(self, key: str) -> str | None:
        """Return the text stored under key, or None if absent or unreadable."""
        ...

    def save(self, key: str, value: str) -> bool:
        """Store text under key, returning True on success."""
        ...


class MemoryStore:
    """In-process store backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self.data.get(key)

    def save(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True


class SqliteStore:
    """Store backed by the `kv` table of a SQLite database."""

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path if db_path is not None else get_db_path()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def initialize(self) -> None:
        """Create the database file and table if needed.

        Raises:
            sqlite3.Error: If database initialization fails.
        """
        init_database(self.db_path)

    def load(self, key: str) -> str | None:
        if not self.db_path.exists():
            return None

        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read %r from %s: %s", key, self.db_path, e)
            return None
        finally:
            conn.close()

        return row[0] if row else None

    def save(self, key: str, value: str) -> bool:
        try:
            conn = self._connect()
        except sqlite3.Error as e:
            logger.error("Could not open %s: %s", self.db_path, e)
            return False

        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO kv (key, value, updated_at) VALUES (?, ?, datetime('now'))
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                    """,
                    (key, value),
                )
        except sqlite3.Error as e:
            logger.error("Could not write %r to %s: %s", key, self.db_path, e)
            return False
        finally:
            conn.close()

        logger.debug("Saved %r (%d bytes) to %s", key, len(value), self.db_path)
        return True
