"""Pure functions for report calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type). Grouped mappings keep the
order in which each key first appears in the input records, and ties in
`top_category` are resolved by that order.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from gastos.domain.expenses import ExpenseRecord
from gastos.domain.models import CategoryName, Money, Payer
from gastos.domain.windows import Window, WindowKind, filter_by_window, window_label

SCOPE_PHRASES: dict[WindowKind, str] = {
    "monthly": "this month",
    "yearly": "this year",
    "all_time": "across your whole history",
}


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable category total with its share of the period."""

    category: CategoryName
    amount: Money
    percentage: int


@dataclass(frozen=True)
class SpendingSummary:
    """Immutable summary of one time window."""

    period: str
    kind: WindowKind
    records: list[ExpenseRecord]
    categories: list[CategoryTotal]
    total: Money
    top: tuple[CategoryName, Money] | None
    suggestion: str


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going toward positive infinity."""
    return math.floor(value + 0.5)


def aggregate_by_category(records: Iterable[ExpenseRecord]) -> dict[CategoryName, Money]:
    """Sum amounts grouped by category.

    Args:
        records: Expense records, usually already filtered to a window.

    Returns:
        Mapping of category to summed amount, in first-occurrence order.
        Categories without records are absent.
    """
    totals: dict[CategoryName, Money] = {}
    for record in records:
        totals[record.category] = Money(totals.get(record.category, 0) + record.amount)
    return totals


def aggregate_by_payer(records: Iterable[ExpenseRecord]) -> dict[Payer, Money]:
    """Sum amounts grouped by payer, in first-occurrence order."""
    totals: dict[Payer, Money] = {}
    for record in records:
        totals[record.payer] = Money(totals.get(record.payer, 0) + record.amount)
    return totals


def total_spent(records: Iterable[ExpenseRecord]) -> Money:
    """Sum of all amounts (0 for no records)."""
    return Money(sum(record.amount for record in records))


def top_category(aggregated: Mapping[CategoryName, Money]) -> tuple[CategoryName, Money] | None:
    """Return the category with the largest total.

    Args:
        aggregated: Mapping from aggregate_by_category.

    Returns:
        (category, amount) of the maximum, the first one on ties, or None if empty.
    """
    if not aggregated:
        return None
    # max() keeps the first maximal item
    category, amount = max(aggregated.items(), key=lambda item: item[1])
    return category, amount


def category_share(amount: Money, total: Money) -> int:
    """Percentage of total represented by amount, rounded to the nearest integer."""
    if total <= 0:
        return 0
    return round_half_up(amount / total * 100)


def suggestion(
    top: tuple[CategoryName, Money] | None,
    total: Money,
    kind: WindowKind,
) -> str:
    """Build the observation shown next to a summary.

    Args:
        top: Result of top_category, None when there are no records.
        total: Total spent in the window.
        kind: Window kind, selects the scope phrase.

    Returns:
        Human-readable suggestion text.
    """
    if top is None:
        return "No expenses recorded for this period."

    category, amount = top
    percentage = category_share(amount, total)
    scope = SCOPE_PHRASES[kind]
    return f"Your biggest expense {scope} is {category} ({percentage}%). Keep an eye on this category."


def sort_category_totals(aggregated: Mapping[CategoryName, Money], total: Money) -> list[CategoryTotal]:
    """Category totals sorted by amount descending, first occurrence on ties."""
    ordered = sorted(aggregated.items(), key=lambda item: item[1], reverse=True)
    return [CategoryTotal(category=cat, amount=amt, percentage=category_share(amt, total)) for cat, amt in ordered]


def create_summary(records: Sequence[ExpenseRecord], window: Window) -> SpendingSummary:
    """Filter records to a window and compute its full summary.

    Args:
        records: All expense records.
        window: Window to summarize.

    Returns:
        SpendingSummary with breakdown, total, top category and suggestion.
    """
    selected = filter_by_window(records, window)
    aggregated = aggregate_by_category(selected)
    total = total_spent(selected)
    top = top_category(aggregated)

    return SpendingSummary(
        period=window_label(window),
        kind=window.kind,
        records=selected,
        categories=sort_category_totals(aggregated, total),
        total=total,
        top=top,
        suggestion=suggestion(top, total, window.kind),
    )


def calculate_histogram_bar_length(
    amount: Money,
    max_amount: Money,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
