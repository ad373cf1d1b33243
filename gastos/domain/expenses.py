"""Pure functions for expense records and their validation.

This module contains the functional core for expense operations:
- No I/O operations (no database, no console, no files)
- No side effects apart from id generation
- Validation happens here so every entry point shares it

All monetary amounts are in cents (Money type).
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from gastos.domain.models import CategoryName, ExpenseId, Money, Payer
from gastos.errors import InvalidExpenseError


@dataclass(frozen=True)
class ExpenseRecord:
    """Immutable expense record."""

    id: ExpenseId
    amount: Money
    category: CategoryName
    payer: Payer
    date: datetime


def new_expense_id() -> ExpenseId:
    """Generate a fresh expense identifier."""
    return ExpenseId(uuid.uuid4().hex)


def validate_amount(amount: object) -> Money:
    """Check that an amount is a non-negative whole number of cents.

    Args:
        amount: Candidate amount in cents.

    Returns:
        The amount as Money.

    Raises:
        InvalidExpenseError: If amount is not an int, is a bool, or is negative.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidExpenseError(f"Amount must be a whole number of cents, got {amount!r}")
    if amount < 0:
        raise InvalidExpenseError(f"Amount must not be negative, got {amount}")
    return Money(amount)


def parse_amount(value: str | int | float | Decimal) -> Money:
    """Convert a user-entered amount in major units to cents.

    Accepts values like "1234.5", "$1,234.50" or 12.3. Rounds half-up to the cent.

    Args:
        value: Amount in major units (e.g., pesos).

    Returns:
        Amount in cents.

    Raises:
        InvalidExpenseError: If the value is not numeric, not finite, or negative.
    """
    if isinstance(value, bool):
        raise InvalidExpenseError(f"Invalid amount: {value!r}")

    if isinstance(value, str):
        cleaned = value.strip().replace("$", "").replace(",", "")
    else:
        cleaned = str(value)

    try:
        decimal_value = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidExpenseError(f"Invalid amount: {value!r}") from None

    if not decimal_value.is_finite():
        raise InvalidExpenseError(f"Amount must be finite, got {value!r}")
    if decimal_value < 0:
        raise InvalidExpenseError(f"Amount must not be negative, got {value!r}")

    try:
        cents = (decimal_value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context holds
        raise InvalidExpenseError(f"Amount is too large: {value!r}") from None
    return Money(int(cents))


def validate_payer(payer: object) -> Payer:
    """Check that a payer label is a non-empty string.

    Raises:
        InvalidExpenseError: If payer is not a string or is blank.
    """
    if not isinstance(payer, str) or not payer.strip():
        raise InvalidExpenseError(f"Payer must be a non-empty label, got {payer!r}")
    return Payer(payer.strip())


def naive_datetime(when: datetime) -> datetime:
    """Drop any timezone, keeping the wall-clock time, so all dates compare."""
    if when.tzinfo is not None:
        return when.replace(tzinfo=None)
    return when


def normalize_expense_date(when: date | datetime | None, now: datetime) -> datetime:
    """Normalize an expense date to a datetime.

    Args:
        when: Date or datetime of the expense, or None for "now".
        now: Current time, used when `when` is None.

    Returns:
        A naive datetime; plain dates become midnight of that day and aware
        datetimes keep their wall-clock time without the offset.

    Raises:
        InvalidExpenseError: If `when` is not a date.
    """
    if when is None:
        return naive_datetime(now)
    if isinstance(when, datetime):
        return naive_datetime(when)
    if isinstance(when, date):
        return datetime(when.year, when.month, when.day)
    raise InvalidExpenseError(f"Invalid expense date: {when!r}")


def sort_chronologically(records: Iterable[ExpenseRecord]) -> list[ExpenseRecord]:
    """Sort records by date, keeping creation order for equal dates."""
    return sorted(records, key=lambda record: record.date)


def format_money_display(amount: Money, currency_symbol: str = "$") -> str:
    """Format money amount for display.

    Args:
        amount: Amount in cents.
        currency_symbol: Symbol to prefix.

    Returns:
        Formatted string (e.g., "$1,234.50").
    """
    units = abs(amount) / 100
    formatted = f"{currency_symbol}{units:,.2f}"
    if amount < 0:
        return f"-{formatted}"
    return formatted
