"""Expense management commands (add, delete)."""

import sys

import typer
from rich.console import Console
from rich.markup import escape

from gastos.commands.admin import require_session
from gastos.dates import parse_date_input
from gastos.domain.expenses import format_money_display, parse_amount
from gastos.errors import GastosError, InvalidExpenseError

console = Console()


def add_command(
    amount: str,
    category: str,
    payer: str | None = None,
    date: str | None = None,
) -> None:
    """Add an expense.

    Args:
        amount: Amount in major units (e.g., "1234.50").
        category: Category name.
        payer: Who paid. Defaults to the configured default payer.
        date: Expense date (YYYY-MM-DD, DD/MM/YYYY, ...). Defaults to now.
    """
    session = require_session()
    settings = session.settings

    try:
        amount_cents = parse_amount(amount)
        expense_date = parse_date_input(date) if date else None
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    try:
        unknown = category.strip() and not session.taxonomy.is_known(category)
        if unknown and settings.unknown_categories == "accept":
            console.print(f"[yellow]Category '{escape(category.strip())}' isn't in your category list[/yellow]")
            if typer.confirm("Add it as a custom category?", default=True):
                session.taxonomy.add_category(category)

        record = session.ledger.add_expense(
            amount_cents,
            category,
            payer or settings.default_payer,
            expense_date,
        )
    except InvalidExpenseError as e:
        console.print(f"[red]Invalid expense: {escape(str(e))}[/red]")
        sys.exit(1)
    except GastosError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense added:")
    console.print(f"  ID: {record.id[:8]}")
    console.print(f"  Date: {record.date:%Y-%m-%d %H:%M}")
    console.print(f"  Category: {escape(record.category)}")
    console.print(f"  Payer: {escape(record.payer)}")
    console.print(f"  Amount: {format_money_display(record.amount, settings.currency_symbol)}")


def delete_command(expense_id: str) -> None:
    """Delete an expense by id or unique id prefix."""
    session = require_session()

    matches = [record for record in session.ledger.list_expenses() if record.id.startswith(expense_id)]

    if not matches:
        console.print(f"[yellow]No expense with id '{escape(expense_id)}'[/yellow]")
        return

    if len(matches) > 1:
        console.print(f"[red]Id prefix '{escape(expense_id)}' matches {len(matches)} expenses, use more characters[/red]")
        sys.exit(1)

    record = matches[0]
    try:
        session.ledger.delete_expense(record.id)
    except GastosError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    amount = format_money_display(record.amount, session.settings.currency_symbol)
    console.print(f"[green]✓[/green] Deleted {escape(record.category)} {amount} on {record.date:%Y-%m-%d}")
