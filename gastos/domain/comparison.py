"""Pure functions for the year-over-year category comparison."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gastos.domain.expenses import ExpenseRecord
from gastos.domain.models import CategoryName, Money
from gastos.domain.report import aggregate_by_category, round_half_up


@dataclass(frozen=True)
class ComparisonRow:
    """Immutable per-category comparison between two years."""

    category: CategoryName
    sum_a: Money
    sum_b: Money
    diff: Money
    percent: int


def change_percent(sum_a: Money, sum_b: Money) -> int:
    """Percentage change from sum_a to sum_b.

    Returns 0 when both are zero and 100 when only sum_b has spending.
    """
    if sum_a == 0:
        return 100 if sum_b > 0 else 0
    return round_half_up((sum_b - sum_a) / sum_a * 100)


def compare_years(records: Iterable[ExpenseRecord], year_a: int, year_b: int) -> list[ComparisonRow]:
    """Compare category spending between two calendar years.

    Args:
        records: All expense records.
        year_a: Baseline year.
        year_b: Year compared against the baseline.

    Returns:
        One row per category active in either year, sorted by year B spending
        descending; equal year B totals keep the order categories were first seen.
    """
    bucket_a: list[ExpenseRecord] = []
    bucket_b: list[ExpenseRecord] = []
    categories: dict[CategoryName, None] = {}

    for record in records:
        year = record.date.year
        if year != year_a and year != year_b:
            continue
        categories.setdefault(record.category, None)
        if year == year_a:
            bucket_a.append(record)
        if year == year_b:
            bucket_b.append(record)

    sums_a = aggregate_by_category(bucket_a)
    sums_b = aggregate_by_category(bucket_b)

    rows = []
    for category in categories:
        sum_a = sums_a.get(category, Money(0))
        sum_b = sums_b.get(category, Money(0))
        rows.append(
            ComparisonRow(
                category=category,
                sum_a=sum_a,
                sum_b=sum_b,
                diff=Money(sum_b - sum_a),
                percent=change_percent(sum_a, sum_b),
            )
        )

    return sorted(rows, key=lambda row: row.sum_b, reverse=True)


def comparison_totals(rows: Sequence[ComparisonRow]) -> ComparisonRow:
    """Collapse comparison rows into a single "Total" row."""
    sum_a = Money(sum(row.sum_a for row in rows))
    sum_b = Money(sum(row.sum_b for row in rows))
    return ComparisonRow(
        category=CategoryName("Total"),
        sum_a=sum_a,
        sum_b=sum_b,
        diff=Money(sum_b - sum_a),
        percent=change_percent(sum_a, sum_b),
    )
