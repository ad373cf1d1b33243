"""Pure functions for time-window filtering.

A window selects the records of one calendar month, one calendar year, or the
whole history. Months are 0-based indexes (0 = January) to match the month
pickers that drive them.
"""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Literal

from gastos.domain.expenses import ExpenseRecord

WindowKind = Literal["monthly", "yearly", "all_time"]


@dataclass(frozen=True)
class Monthly:
    """Exact calendar month, with `month` in 0-11."""

    month: int
    year: int

    kind: ClassVar[WindowKind] = "monthly"

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError(f"Month index must be between 0 and 11, got {self.month}")


@dataclass(frozen=True)
class Yearly:
    """Exact calendar year."""

    year: int

    kind: ClassVar[WindowKind] = "yearly"


@dataclass(frozen=True)
class AllTime:
    """No filtering."""

    kind: ClassVar[WindowKind] = "all_time"


Window = Monthly | Yearly | AllTime


def matches_window(record: ExpenseRecord, window: Window) -> bool:
    """Check whether a record's date falls inside a window."""
    if isinstance(window, AllTime):
        return True
    if isinstance(window, Yearly):
        return record.date.year == window.year
    return record.date.year == window.year and record.date.month - 1 == window.month


def filter_by_window(records: Iterable[ExpenseRecord], window: Window) -> list[ExpenseRecord]:
    """Return the records inside a window, preserving input order.

    Args:
        records: Expense records to filter.
        window: Monthly, Yearly or AllTime window.

    Returns:
        Matching records (empty when nothing matches).
    """
    return [record for record in records if matches_window(record, window)]


def window_label(window: Window) -> str:
    """Human-readable period label (e.g., "March 2024", "All of 2024", "All Time")."""
    if isinstance(window, AllTime):
        return "All Time"
    if isinstance(window, Yearly):
        return f"All of {window.year}"
    return f"{calendar.month_name[window.month + 1]} {window.year}"


def window_for(
    all_time: bool,
    month: str | None,
    year: int | None,
    today: date,
) -> Window:
    """Build a window from command line selectors.

    Precedence: all time, then a specific month, then a whole year, then the
    current month.

    Args:
        all_time: Whether to use the whole history.
        month: Optional month in YYYY-MM format.
        year: Optional year.
        today: Current date, used for the default month.

    Returns:
        The selected window.

    Raises:
        ValueError: If month is not a valid YYYY-MM string.
    """
    if all_time:
        return AllTime()
    if month:
        year_part, _, month_part = month.partition("-")
        if not (year_part.isdigit() and month_part.isdigit()):
            raise ValueError(f"Month must be in YYYY-MM format, got {month!r}")
        return Monthly(month=int(month_part) - 1, year=int(year_part))
    if year is not None:
        return Yearly(year=year)
    return Monthly(month=today.month - 1, year=today.year)


def available_years(records: Iterable[ExpenseRecord], today: date) -> list[int]:
    """Years with data plus the current and previous year, newest first."""
    years = {record.date.year for record in records}
    years.add(today.year)
    years.add(today.year - 1)
    return sorted(years, reverse=True)
