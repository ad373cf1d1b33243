"""Report and compare commands for viewing spending summaries."""

from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gastos.commands.admin import require_session
from gastos.domain.comparison import ComparisonRow, compare_years, comparison_totals
from gastos.domain.expenses import format_money_display
from gastos.domain.models import Money
from gastos.domain.report import aggregate_by_payer, calculate_histogram_bar_length, create_summary
from gastos.domain.windows import Window, available_years

console = Console()


def format_change_with_color(percent: int) -> str:
    """Format a year-over-year change, red for more spending, green for less.

    Args:
        percent: Percentage change.

    Returns:
        Colored string for the change column.
    """
    if percent > 0:
        return f"[red]▲ +{percent}%[/red]"
    elif percent < 0:
        return f"[green]▼ {percent}%[/green]"
    else:
        return "[dim]= 0%[/dim]"


def report_command(window: Window, histogram: bool = True) -> None:
    """Show spending by category for a window, with the top category and a suggestion."""
    session = require_session()
    symbol = session.settings.currency_symbol

    summary = create_summary(session.ledger.list_expenses(), window)

    console.print(f"[bold cyan]{summary.period}[/bold cyan]\n")

    if not summary.categories:
        console.print(f"[dim]{escape(summary.suggestion)}[/dim]")
        return

    console.print("[bold red]Spending by category:[/bold red]\n")
    max_amount = Money(max(cat.amount for cat in summary.categories))
    bar_width = 30

    for cat in summary.categories:
        amount_display = format_money_display(cat.amount, symbol)
        share = f"({cat.percentage}%)"
        if histogram:
            bar = "█" * calculate_histogram_bar_length(cat.amount, max_amount, bar_width)
            console.print(f"  {escape(cat.category):20} {amount_display:>14} {share:>6} {bar}")
        else:
            console.print(f"  {escape(cat.category)}: {amount_display} {share}")

    console.print(f"\n  [bold]Total spent:[/bold] {format_money_display(summary.total, symbol)}")

    payers = aggregate_by_payer(summary.records)
    if len(payers) > 1:
        paid = ", ".join(f"{escape(payer)} {format_money_display(amount, symbol)}" for payer, amount in payers.items())
        console.print(f"  [dim]Paid by: {paid}[/dim]")

    if summary.top is not None:
        top_category, top_amount = summary.top
        console.print(f"\n[bold]Top category:[/bold] {escape(top_category)} ({format_money_display(top_amount, symbol)})")
    console.print(f"[cyan]{escape(summary.suggestion)}[/cyan]")


def add_comparison_row(table: Table, row: ComparisonRow, symbol: str, bold: bool = False) -> None:
    """Append one comparison row to a rich table."""
    style = "bold" if bold else None
    table.add_row(
        escape(row.category),
        format_money_display(row.sum_a, symbol),
        format_money_display(row.sum_b, symbol),
        format_money_display(row.diff, symbol),
        format_change_with_color(row.percent),
        style=style,
    )


def compare_command(year_a: int, year_b: int) -> None:
    """Compare category spending between two years."""
    session = require_session()
    symbol = session.settings.currency_symbol

    records = session.ledger.list_expenses()
    rows = compare_years(records, year_a, year_b)

    if not rows:
        console.print(f"[yellow]Not enough data to compare {year_a} and {year_b}[/yellow]")
        years = ", ".join(str(year) for year in available_years(records, date.today()))
        console.print(f"[dim]Years to choose from: {years}[/dim]")
        return

    table = Table(title=f"{year_a} vs {year_b}")
    table.add_column("Category", style="magenta")
    table.add_column(f"Total {year_a}", justify="right", style="dim")
    table.add_column(f"Total {year_b}", justify="right")
    table.add_column("Difference", justify="right")
    table.add_column("Change", justify="right")

    for row in rows:
        add_comparison_row(table, row, symbol)

    table.add_section()
    add_comparison_row(table, comparison_totals(rows), symbol, bold=True)

    console.print(table)
