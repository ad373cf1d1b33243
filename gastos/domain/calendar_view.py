"""Pure functions for the calendar view of expenses."""

from collections.abc import Iterable, Mapping
from datetime import date

from gastos.domain.expenses import ExpenseRecord, format_money_display, sort_chronologically
from gastos.domain.models import Payer

DEFAULT_PAYER_COLOR = "grey50"


def group_by_day(records: Iterable[ExpenseRecord]) -> dict[date, list[ExpenseRecord]]:
    """Group records by calendar day.

    Returns:
        Mapping of day to its records, days ascending and records chronological.
    """
    days: dict[date, list[ExpenseRecord]] = {}
    for record in sort_chronologically(records):
        days.setdefault(record.date.date(), []).append(record)
    return days


def event_title(record: ExpenseRecord, currency_symbol: str = "$") -> str:
    """Short label for a calendar entry (e.g., "$120.00 - Nafta")."""
    return f"{format_money_display(record.amount, currency_symbol)} - {record.category}"


def payer_color(payer: Payer, palette: Mapping[str, str], default: str = DEFAULT_PAYER_COLOR) -> str:
    """Colour for a payer, falling back to the default for unknown payers."""
    return palette.get(payer, default)
