"""Admin commands for backup, init, and listing expenses."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gastos.config import create_default_config, get_config_path
from gastos.domain.calendar_view import payer_color
from gastos.domain.expenses import format_money_display, sort_chronologically
from gastos.domain.windows import Window, filter_by_window, window_label
from gastos.errors import GastosError
from gastos.session import Session, open_session
from gastos.store.schema import database_exists, get_db_path, init_database

console = Console()


def require_session() -> Session:
    """Open the session, exiting with a message if gastos isn't initialized."""
    db_path = get_db_path()

    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'gastos init' first.[/red]", style="bold")
        sys.exit(1)

    try:
        return open_session(db_path)
    except GastosError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def backup_command(
    output_dir: str | None = None,
) -> None:
    """Backup database and configuration files."""
    db_path = get_db_path()
    config_path = get_config_path()

    if not database_exists(db_path):
        console.print("[red]Database not found. Run 'gastos init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".gastos" / "backups"

    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    db_backup = backup_dir / f"gastos_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        # Config is optional; defaults apply when it's missing
        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def init_command(force: bool = False) -> None:
    """Initialize gastos database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = database_exists(db_path)
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'gastos init --force' to overwrite[/yellow]")
            sys.exit(1)

        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def list_command(
    window: Window,
    limit: int = 50,
    all: bool = False,
) -> None:
    """List expenses in a window, newest first."""
    session = require_session()
    settings = session.settings

    records = filter_by_window(session.ledger.list_expenses(), window)
    records = list(reversed(sort_chronologically(records)))

    if not records:
        console.print(f"[yellow]No expenses found for {window_label(window)}[/yellow]")
        return

    shown = records if all else records[:limit]

    table = Table(title=f"Expenses - {window_label(window)} (showing {len(shown)} of {len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Payer")
    table.add_column("Amount", justify="right")

    for record in shown:
        color = payer_color(record.payer, settings.payer_colors)
        table.add_row(
            record.id[:8],
            record.date.strftime("%Y-%m-%d"),
            escape(record.category),
            f"[{color}]{escape(record.payer)}[/{color}]",
            format_money_display(record.amount, settings.currency_symbol),
        )

    console.print(table)
