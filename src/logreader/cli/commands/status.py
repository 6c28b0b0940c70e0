"""Status command: record counts per file and level."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from logreader.cli.context import load_config, open_store
from logreader.errors import LogReaderError
from logreader.reader.options import QueryOptions
from logreader.reader.summary import level_breakdown

console = Console()


def status(
    include_read: bool = typer.Option(True, help="Count records already marked read"),
    log_dir: str = typer.Option("", help="Log directory. Env: LOGREADER_LOG_DIR"),
    db_path: str = typer.Option("", help="Read-mark database path. Env: LOGREADER_DB"),
    naming: str = typer.Option("", help="File naming: single or daily. Env: LOGREADER_NAMING"),
    prefix: str = typer.Option("", help="Log file prefix. Env: LOGREADER_FILE_PREFIX"),
) -> None:
    """Show record counts per log file and level."""
    try:
        config = load_config(log_dir, db_path, naming, prefix)
        with open_store(config) as store:
            records = store.query(QueryOptions(include_read=include_read))
    except (LogReaderError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    summary = level_breakdown(records)
    if summary.is_empty():
        console.print(f"[yellow]No log records found in {escape(config.log_dir)}.[/yellow]")
        return

    table = Table(title=f"Log records in {config.log_dir}")
    table.add_column("File", style="cyan")
    table.add_column("Level")
    table.add_column("Records", style="green", justify="right")

    for row in summary.iter_rows(named=True):
        table.add_row(Path(row["source_path"]).name, row["level"], f"{row['count']:,}")

    table.add_row("[bold]Total[/bold]", "", f"[bold]{len(records):,}[/bold]")
    console.print(table)
