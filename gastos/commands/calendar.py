"""Calendar command: a month of expenses, day by day."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gastos.commands.admin import require_session
from gastos.domain.calendar_view import event_title, group_by_day, payer_color
from gastos.domain.expenses import format_money_display
from gastos.domain.report import total_spent
from gastos.domain.windows import Monthly, filter_by_window, window_label

console = Console()


def calendar_command(window: Monthly) -> None:
    """Show each day of a month with its expenses, coloured by payer."""
    session = require_session()
    settings = session.settings

    records = filter_by_window(session.ledger.list_expenses(), window)
    days = group_by_day(records)

    if not days:
        console.print(f"[yellow]No expenses in {window_label(window)}[/yellow]")
        return

    table = Table(title=window_label(window))
    table.add_column("Day", style="cyan")
    table.add_column("Expenses")
    table.add_column("Total", justify="right")

    for day, day_records in days.items():
        entries = []
        for record in day_records:
            color = payer_color(record.payer, settings.payer_colors)
            entries.append(f"[{color}]{escape(event_title(record, settings.currency_symbol))}[/{color}]")
        table.add_row(
            day.strftime("%a %d"),
            "\n".join(entries),
            format_money_display(total_spent(day_records), settings.currency_symbol),
        )

    console.print(table)

    legend = "  ".join(f"[{color}]■ {escape(payer)}[/{color}]" for payer, color in settings.payer_colors.items())
    if legend:
        console.print(legend)
