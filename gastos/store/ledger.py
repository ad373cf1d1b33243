"""Expense ledger backed by a key-value store."""

import logging
from collections.abc import Callable
from datetime import date, datetime

from gastos.domain.categories import UnknownCategoryPolicy
from gastos.domain.expenses import (
    ExpenseRecord,
    new_expense_id,
    normalize_expense_date,
    validate_amount,
    validate_payer,
)
from gastos.domain.models import ExpenseId, Money
from gastos.errors import PersistenceError
from gastos.store.codec import decode_expenses, encode_expenses
from gastos.store.kv import EXPENSES_KEY, KeyValueStore
from gastos.store.taxonomy import Taxonomy

logger = logging.getLogger(__name__)


class Ledger:
    """The household's collection of expense records.

    Records are loaded from the store once, on creation. Absent or unreadable
    data gives an empty ledger. Every add or delete writes the whole collection
    back; if the write fails the change is undone and PersistenceError is raised.
    """

    def __init__(
        self,
        store: KeyValueStore,
        taxonomy: Taxonomy,
        unknown_categories: UnknownCategoryPolicy = "accept",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._taxonomy = taxonomy
        self._unknown_categories = unknown_categories
        self._clock = clock
        self._records: list[ExpenseRecord] = self._load()

    def _load(self) -> list[ExpenseRecord]:
        text = self._store.load(EXPENSES_KEY)
        if text is None:
            return []
        try:
            records = decode_expenses(text)
        except ValueError as e:
            logger.warning("Ignoring unreadable expenses: %s", e)
            return []
        logger.debug("Loaded %d expenses", len(records))
        return records

    def _persist(self) -> bool:
        return self._store.save(EXPENSES_KEY, encode_expenses(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def add_expense(
        self,
        amount: Money,
        category: str,
        payer: str,
        date: date | datetime | None = None,
    ) -> ExpenseRecord:
        """Record a new expense.

        Args:
            amount: Amount in cents, a non-negative int.
            category: Category label, checked against the taxonomy.
            payer: Household member who paid.
            date: Date of the expense. Defaults to now.

        Returns:
            The new record, already persisted.

        Raises:
            InvalidExpenseError: If amount, category, payer or date is invalid.
            PersistenceError: If the store rejects the write.
        """
        valid_amount = validate_amount(amount)
        valid_payer = validate_payer(payer)
        expense_date = normalize_expense_date(date, self._clock())
        category_name = self._taxonomy.check(category, self._unknown_categories)

        record = ExpenseRecord(
            id=new_expense_id(),
            amount=valid_amount,
            category=category_name,
            payer=valid_payer,
            date=expense_date,
        )

        self._records.append(record)
        if not self._persist():
            self._records.pop()
            raise PersistenceError("Could not save the new expense")

        # New labels are registered only once the expense itself is stored
        if self._unknown_categories == "register":
            try:
                self._taxonomy.add_category(category_name)
            except PersistenceError:
                self._records.pop()
                if not self._persist():
                    logger.error("Could not undo expense %s after a failed category save", record.id)
                raise

        logger.debug("Added expense %s (%s, %d)", record.id, record.category, record.amount)
        return record

    def delete_expense(self, expense_id: ExpenseId | str) -> bool:
        """Delete an expense by id.

        Args:
            expense_id: Id of the record to remove.

        Returns:
            True if a record was removed, False if no record had that id.

        Raises:
            PersistenceError: If the store rejects the write (the record is kept).
        """
        for index, record in enumerate(self._records):
            if record.id == expense_id:
                break
        else:
            return False

        del self._records[index]
        if not self._persist():
            self._records.insert(index, record)
            raise PersistenceError(f"Could not delete expense {expense_id}")

        logger.debug("Deleted expense %s", expense_id)
        return True

    def get_expense(self, expense_id: ExpenseId | str) -> ExpenseRecord | None:
        return next((record for record in self._records if record.id == expense_id), None)

    def list_expenses(self) -> tuple[ExpenseRecord, ...]:
        """All records in insertion order (not necessarily chronological)."""
        return tuple(self._records)
