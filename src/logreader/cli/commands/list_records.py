"""List command: show one page of log records."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from logreader.cli.context import load_config, open_store
from logreader.errors import LogReaderError
from logreader.reader.options import QueryOptions
from logreader.reader.pagination import Page, page_from_input, paginate

console = Console()

LEVEL_COLORS = {
    "emergency": "bold red",
    "alert": "bold red",
    "critical": "red",
    "error": "red",
    "warning": "yellow",
    "notice": "cyan",
    "info": "green",
    "debug": "dim",
}


def list_records(
    level: str = typer.Option("all", help="Level filter (all, error, warning, ...)"),
    date: str = typer.Option("", help="Only logs of this day: YYYY-MM-DD or Unix timestamp"),
    include_read: bool = typer.Option(False, help="Include records already marked read"),
    order: str = typer.Option("asc", help="Order: asc or desc"),
    page: str = typer.Option("1", help="Page number"),
    per_page: int = typer.Option(0, help="Records per page. Env: LOGREADER_PER_PAGE"),
    log_dir: str = typer.Option("", help="Log directory. Env: LOGREADER_LOG_DIR"),
    db_path: str = typer.Option("", help="Read-mark database path. Env: LOGREADER_DB"),
    naming: str = typer.Option("", help="File naming: single or daily. Env: LOGREADER_NAMING"),
    prefix: str = typer.Option("", help="Log file prefix. Env: LOGREADER_FILE_PREFIX"),
) -> None:
    """List log records, one page at a time."""
    try:
        config = load_config(log_dir, db_path, naming, prefix)
        options = QueryOptions.create(
            level=level, date=date or None, include_read=include_read, order=order
        )
        with open_store(config) as store:
            records = store.query(options)
        result = paginate(records, per_page=per_page or config.per_page, page=page_from_input(page))
    except (LogReaderError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _print_page(result)


def _print_page(result: Page) -> None:
    if not result.total:
        console.print("[yellow]No log records found.[/yellow]")
        return

    table = Table(title=f"Log records (page {result.current_page}/{result.last_page}, {result.total} total)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Level")
    table.add_column("Header")

    for r in result.items:
        color = LEVEL_COLORS.get(r.level.value, "white")
        table.add_row(
            r.identity,
            f"[{color}]{r.level.value}[/{color}]",
            Text(r.header[:80]),
        )

    console.print(table)
