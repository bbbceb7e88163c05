"""
Action log commands: show
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from statekit.core import ActionLogError, canonical_json_str
from statekit.replay import read_actions

app = typer.Typer()
console = Console()


@app.command()
def show(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSONL action log"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Show only the last N actions"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List the actions in an action log.

    Examples:
        statekit log show --log actions.jsonl
        statekit log show --log actions.jsonl --lines 10 --json
    """
    try:
        actions = list(enumerate(read_actions(log_path)))
    except FileNotFoundError:
        console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except ActionLogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if lines:
        actions = actions[-lines:]

    if json_output:
        print(json.dumps({"actions": [a for _, a in actions], "count": len(actions)}, indent=2))
        return

    if not actions:
        console.print("[yellow]Action log is empty[/yellow]")
        return

    table = Table(title=f"Action Log: {log_path}")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Type", style="green")
    table.add_column("Payload", style="dim")
    for index, action in actions:
        payload = {k: v for k, v in action.items() if k != "type"}
        table.add_row(str(index), str(action["type"]), canonical_json_str(payload))
    console.print(table)
