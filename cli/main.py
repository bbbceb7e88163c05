#!/usr/bin/env python3
"""
statekit CLI

Main entrypoint for the statekit command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import log, replay
from statekit.logging_config import setup_logging

app = typer.Typer(
    name="statekit",
    help="Predictable state container tools",
    add_completion=False,
)

console = Console()

app.add_typer(log.app, name="log", help="Action log operations")

app.command(name="replay")(replay.replay_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]statekit[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
