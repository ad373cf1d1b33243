"""Wiring of settings, store, taxonomy and ledger for one process."""

from dataclasses import dataclass
from pathlib import Path

from gastos.config import Settings, load_settings
from gastos.store.kv import KeyValueStore, SqliteStore
from gastos.store.ledger import Ledger
from gastos.store.taxonomy import Taxonomy


@dataclass(frozen=True)
class Session:
    """The objects a command works with."""

    settings: Settings
    taxonomy: Taxonomy
    ledger: Ledger


def build_session(store: KeyValueStore, settings: Settings) -> Session:
    """Create the taxonomy and ledger over an existing store."""
    taxonomy = Taxonomy(store, settings.builtin_categories)
    ledger = Ledger(store, taxonomy, settings.unknown_categories)
    return Session(settings=settings, taxonomy=taxonomy, ledger=ledger)


def open_session(db_path: Path | None = None, config_path: Path | None = None) -> Session:
    """Load settings and open the SQLite-backed ledger.

    Args:
        db_path: Path to the database file. If None, uses default location.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Session ready for use.

    Raises:
        ConfigError: If the config file is invalid.
    """
    settings = load_settings(config_path)
    return build_session(SqliteStore(db_path), settings)
