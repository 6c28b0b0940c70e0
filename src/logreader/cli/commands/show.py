"""Show command: print one record with its body."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from logreader.cli.context import load_config, open_store
from logreader.errors import LogReaderError

console = Console()


def show(
    identity: str = typer.Argument(help="Record ID"),
    log_dir: str = typer.Option("", help="Log directory. Env: LOGREADER_LOG_DIR"),
    db_path: str = typer.Option("", help="Read-mark database path. Env: LOGREADER_DB"),
    naming: str = typer.Option("", help="File naming: single or daily. Env: LOGREADER_NAMING"),
    prefix: str = typer.Option("", help="Log file prefix. Env: LOGREADER_FILE_PREFIX"),
) -> None:
    """Show a single log record."""
    try:
        config = load_config(log_dir, db_path, naming, prefix)
        with open_store(config) as store:
            record = store.find(identity)
    except (LogReaderError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if record is None:
        console.print(f"[red]Record {identity} not found.[/red]")
        raise typer.Exit(1)

    content = Text()
    content.append("Level: ", style="bold")
    content.append(f"{record.level.value}\n")
    content.append("File: ", style="bold")
    content.append(f"{record.source_path}\n")
    content.append("Timestamp: ", style="bold")
    content.append(f"{record.timestamp}\n\n")
    content.append(record.header + "\n")
    content.append(record.body.rstrip("\r\n"))

    console.print(Panel(content, title=f"Record {identity}", border_style="cyan"))
