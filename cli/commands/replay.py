"""
Replay command: replay an action log through a combined reducer
"""

import importlib
import json
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from statekit.core import DispatchConfig, apply_middleware, canonical_json_str, combine_reducers
from statekit.core.actions import get_action_type
from statekit.interceptors import create_logger_middleware
from statekit.replay import compute_state_hash, read_actions
from statekit.replay import replay as replay_actions
from statekit.store import create_store

console = Console()


def load_object(target: str) -> Any:
    """
    Import "package.module:attribute".

    Raises:
        typer.BadParameter: If target is malformed or cannot be imported
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise typer.BadParameter(f"Expected MODULE:ATTRIBUTE, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module {module_name!r}: {e}") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise typer.BadParameter(f"Module {module_name!r} has no attribute {attr!r}") from e


def build_reducer(target: Any, config: DispatchConfig) -> Any:
    if isinstance(target, Mapping):
        return combine_reducers(target, config=config)
    if callable(target):
        return target
    raise typer.BadParameter(
        f"Expected a mapping of reducers or a reducer, got {type(target).__name__}"
    )


def replay_command(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSONL action log"),
    reducers: str = typer.Option(
        ...,
        "--reducers",
        "-r",
        help="MODULE:ATTRIBUTE naming a reducer mapping or a root reducer",
    ),
    middleware: Optional[List[str]] = typer.Option(
        None, "--middleware", "-m", help="MODULE:ATTRIBUTE of extra middleware (repeatable)"
    ),
    until: Optional[int] = typer.Option(
        None, "--until", "-u", min=0, help="Replay up to this zero-based action index"
    ),
    production: bool = typer.Option(
        False, "--production", help="Disable development-mode diagnostics"
    ),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log and report the resulting state.

    Examples:
        statekit replay --log actions.jsonl --reducers myapp.reducers:REDUCERS
        statekit replay -l actions.jsonl -r myapp.reducers:root --until 10
        statekit replay -l actions.jsonl -r myapp.reducers:REDUCERS --json
    """
    config = DispatchConfig(dev_mode=not production)
    try:
        root_reducer = build_reducer(load_object(reducers), config)
        middlewares = [create_logger_middleware()]
        middlewares.extend(load_object(target) for target in middleware or [])

        store = create_store(
            root_reducer, enhancer=apply_middleware(*middlewares, config=config)
        )
        actions = list(read_actions(log_path))
        result = replay_actions(store, actions, to_index=until)
        state_json = canonical_json_str(result.state)
        state_hash = compute_state_hash(result.state)
    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except typer.BadParameter:
        raise
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    action_counts: Dict[str, int] = {}
    for action in actions[: result.applied]:
        action_type = str(get_action_type(action))
        action_counts[action_type] = action_counts.get(action_type, 0) + 1

    if json_output:
        output: Dict[str, Any] = {
            "success": True,
            "actions_replayed": result.applied,
            "state_hash": state_hash,
            "action_counts": action_counts,
        }
        if show_state:
            output["state"] = json.loads(state_json)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
    console.print(f"  State hash: [yellow]{state_hash}[/yellow]")

    table = Table(title="Action Counts")
    table.add_column("Action Type", style="green")
    table.add_column("Count", style="cyan", justify="right")
    for action_type in sorted(action_counts):
        table.add_row(action_type, str(action_counts[action_type]))
    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        syntax_str = json.dumps(json.loads(state_json), indent=2)
        console.print(Syntax(syntax_str, "json", theme="monokai"))
