"""Shared fixtures for gastos tests."""

from collections.abc import Callable
from datetime import datetime
from itertools import count

import pytest

from gastos.domain.expenses import ExpenseRecord
from gastos.domain.models import CategoryName, ExpenseId, Money, Payer

MakeExpense = Callable[..., ExpenseRecord]


@pytest.fixture
def make_expense() -> MakeExpense:
    """Factory for expense records with sequential ids."""
    ids = count(1)

    def _make(
        amount: int,
        category: str,
        when: datetime,
        payer: str = "Tomi",
    ) -> ExpenseRecord:
        return ExpenseRecord(
            id=ExpenseId(f"exp{next(ids):04d}"),
            amount=Money(amount),
            category=CategoryName(category),
            payer=Payer(payer),
            date=when,
        )

    return _make


@pytest.fixture
def sample_expenses(make_expense: MakeExpense) -> list[ExpenseRecord]:
    """Two March 2024 expenses and one March 2025 expense."""
    return [
        make_expense(100, "Nafta", datetime(2024, 3, 1)),
        make_expense(300, "Supermercado", datetime(2024, 3, 15)),
        make_expense(50, "Nafta", datetime(2025, 3, 1)),
    ]
