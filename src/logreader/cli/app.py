"""Typer CLI application."""

import typer

from logreader.cli.commands.delete import delete
from logreader.cli.commands.list_records import list_records
from logreader.cli.commands.mark_read import mark_read
from logreader.cli.commands.show import show
from logreader.cli.commands.status import status
from logreader.cli.context import configure_logging

app = typer.Typer(
    name="logreader",
    help="Read, acknowledge and prune Laravel-style log records",
    no_args_is_help=True,
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    configure_logging(verbose)


app.command(name="list")(list_records)
app.command()(show)
app.command(name="mark-read")(mark_read)
app.command()(delete)
app.command()(status)
