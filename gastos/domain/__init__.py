"""Domain models and types for gastos.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from gastos.domain.models import CategoryName, ExpenseId, Money, Payer

__all__ = ["Money", "CategoryName", "Payer", "ExpenseId"]
