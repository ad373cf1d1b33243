"""Category commands."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gastos.commands.admin import require_session
from gastos.errors import GastosError

console = Console()


def categories_command() -> None:
    """Show built-in and custom categories."""
    session = require_session()
    taxonomy = session.taxonomy

    table = Table(title="Categories")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Kind", style="dim")

    builtin = set(taxonomy.builtin_categories)
    for idx, category in enumerate(taxonomy.list_categories(), 1):
        table.add_row(str(idx), escape(category), "built-in" if category in builtin else "custom")

    console.print(table)


def add_category_command(label: str) -> None:
    """Add a custom category."""
    session = require_session()

    try:
        added = session.taxonomy.add_category(label)
    except GastosError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    if added:
        console.print(f"[green]✓[/green] Created category: {escape(label.strip())}")
    elif not label.strip():
        console.print("[yellow]Category name is empty, nothing to add[/yellow]")
    else:
        console.print(f"[dim]Category '{escape(label.strip())}' already exists[/dim]")
