"""Exceptions raised by gastos."""


class GastosError(Exception):
    """Base class for all gastos errors."""


class InvalidExpenseError(GastosError, ValueError):
    """Raised when an expense or category fails validation at the ledger boundary."""


class PersistenceError(GastosError):
    """Raised when the storage adapter reports a failed write."""


class ConfigError(GastosError):
    """Raised when the configuration file holds an unusable value."""
