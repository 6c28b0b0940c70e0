"""Mark-read command: acknowledge one record or every matching record."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from logreader.cli.context import load_config, open_store
from logreader.errors import LogReaderError
from logreader.reader.options import QueryOptions

console = Console()


def mark_read(
    identity: str = typer.Option("", "--id", help="Mark only this record ID"),
    level: str = typer.Option("all", help="Level filter (all, error, warning, ...)"),
    date: str = typer.Option("", help="Only logs of this day: YYYY-MM-DD or Unix timestamp"),
    log_dir: str = typer.Option("", help="Log directory. Env: LOGREADER_LOG_DIR"),
    db_path: str = typer.Option("", help="Read-mark database path. Env: LOGREADER_DB"),
    naming: str = typer.Option("", help="File naming: single or daily. Env: LOGREADER_NAMING"),
    prefix: str = typer.Option("", help="Log file prefix. Env: LOGREADER_FILE_PREFIX"),
) -> None:
    """Mark log records as read so they are hidden from listings."""
    try:
        config = load_config(log_dir, db_path, naming, prefix)
        with open_store(config) as store:
            if identity:
                mark = store.mark_read(identity)
                if mark is None:
                    console.print(f"[red]Record {identity} not found.[/red]")
                    raise typer.Exit(1)
                console.print(f"[green]Record {identity} marked as read.[/green]")
                return
            options = QueryOptions.create(level=level, date=date or None)
            count = store.mark_all_read(options)
    except (LogReaderError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Marked {count} record(s) as read.[/green]")
