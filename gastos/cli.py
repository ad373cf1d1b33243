"""CLI entry point for gastos."""

import logging
import sys
from datetime import date

import typer
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from gastos.commands.admin import backup_command, init_command, list_command
from gastos.commands.calendar import calendar_command
from gastos.commands.categories import add_category_command, categories_command
from gastos.commands.expenses import add_command, delete_command
from gastos.commands.report import compare_command, report_command
from gastos.domain.windows import Monthly, Window, window_for

app = typer.Typer(
    name="gastos",
    help="Gastos - household expense tracking",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def resolve_window(all: bool, month: str | None, year: int | None) -> Window:
    """Build the report window from options, exiting on a bad --month."""
    try:
        return window_for(all, month, year, date.today())
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Gastos - household expense tracking."""
    configure_logging(verbose)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.gastos/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize gastos database and configuration."""
    init_command(force)


@app.command(name="add")
def add(
    amount: str,
    category: str,
    payer: str = typer.Option(None, "--payer", "-p", help="Who paid (default: from config)"),
    date_: str = typer.Option(None, "--date", "-d", help="Expense date (YYYY-MM-DD or DD/MM/YYYY, default: now)"),
) -> None:
    """Record an expense."""
    add_command(amount, category, payer, date_)


@app.command(name="delete")
def delete(
    expense_id: str,
) -> None:
    """Delete an expense by id (or a unique id prefix)."""
    delete_command(expense_id)


@app.command(name="list")
def list_expenses(
    limit: int = typer.Option(50, help="Maximum expenses to show"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
    year: int = typer.Option(None, "--year", help="Whole year (YYYY)"),
    everything: bool = typer.Option(False, "--no-limit", help="Show every matching expense"),
) -> None:
    """List your expenses, newest first."""
    list_command(resolve_window(all, month, year), limit, everything)


@app.command(name="categories")
def categories() -> None:
    """Show your categories."""
    categories_command()


@app.command(name="add-category")
def add_category(
    label: str,
) -> None:
    """Add a custom category."""
    add_category_command(label)


@app.command(name="report")
def report(
    histogram: bool = typer.Option(True, help="Show histogram of your spending"),
    all: bool = typer.Option(False, "--all", "-a", help="Show all time"),
    month: str = typer.Option(None, "--month", help="Specific month (YYYY-MM)"),
    year: int = typer.Option(None, "--year", help="Whole year (YYYY)"),
) -> None:
    """Show your spending breakdown (default: current month)."""
    report_command(resolve_window(all, month, year), histogram)


@app.command(name="compare")
def compare(
    year_a: int = typer.Argument(None, help="Baseline year (default: last year)"),
    year_b: int = typer.Argument(None, help="Year to compare (default: this year)"),
) -> None:
    """Compare your category spending between two years."""
    this_year = date.today().year
    compare_command(
        year_a if year_a is not None else this_year - 1,
        year_b if year_b is not None else this_year,
    )


@app.command(name="calendar")
def calendar(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: current month)"),
) -> None:
    """Show a month of expenses day by day."""
    window = resolve_window(False, month, None)
    assert isinstance(window, Monthly)
    calendar_command(window)


if __name__ == "__main__":
    app()
