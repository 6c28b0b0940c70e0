"""Delete command: excise one record or every matching record from its file."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from logreader.cli.context import load_config, open_store
from logreader.errors import LogReaderError
from logreader.reader.options import QueryOptions

console = Console()


def delete(
    identity: str = typer.Option("", "--id", help="Delete only this record ID"),
    level: str = typer.Option("all", help="Level filter (all, error, warning, ...)"),
    date: str = typer.Option("", help="Only logs of this day: YYYY-MM-DD or Unix timestamp"),
    include_read: bool = typer.Option(False, help="Also delete records already marked read"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    log_dir: str = typer.Option("", help="Log directory. Env: LOGREADER_LOG_DIR"),
    db_path: str = typer.Option("", help="Read-mark database path. Env: LOGREADER_DB"),
    naming: str = typer.Option("", help="File naming: single or daily. Env: LOGREADER_NAMING"),
    prefix: str = typer.Option("", help="Log file prefix. Env: LOGREADER_FILE_PREFIX"),
) -> None:
    """Remove log records from their log files."""
    if not yes:
        target = f"record {identity}" if identity else "all matching records"
        typer.confirm(f"Delete {target} from the log files?", abort=True)

    try:
        config = load_config(log_dir, db_path, naming, prefix)
        with open_store(config) as store:
            if identity:
                if not store.delete(identity):
                    console.print(f"[red]Record {identity} not found.[/red]")
                    raise typer.Exit(1)
                console.print(f"[green]Record {identity} deleted.[/green]")
                return
            options = QueryOptions.create(level=level, date=date or None, include_read=include_read)
            count = store.delete_all(options)
    except (LogReaderError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Deleted {count} record(s).[/green]")
