"""
Show Command - Inspect the composed note network.

Prints the notes, visible connections and path for a view configuration,
either as rich tables or as JSON for tooling.
"""

import json

import click
from rich.console import Console
from rich.table import Table

from ...core.types import CompletionFilter, ViewMode
from ...view.composer import classify_connection, compose_view, index_notes, path_position
from ..utils import load_store, resolve_project, view_options

console = Console()


@click.command()
@click.argument("snapshot", default=".")
@view_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(snapshot: str, project_id: str, mode: str, completion: str, as_json: bool):
    """
    Show the notes, connections and path of a view.
    """
    store = load_store(snapshot)
    if store is None:
        return

    active = resolve_project(store, project_id)
    if project_id is not None and active is None:
        return

    view = compose_view(store, ViewMode(mode), CompletionFilter(completion), active)
    by_id = index_notes(view.notes)

    if as_json:
        click.echo(json.dumps({
            "project": active,
            "mode": mode,
            "filter": completion,
            "notes": [n.model_dump(by_alias=True) for n in view.notes],
            "connections": [
                {**c.model_dump(by_alias=True), "kind": classify_connection(c, by_id).value}
                for c in view.connections
            ],
            "path": view.path,
        }, indent=2))
        return

    notes_table = Table(title=f"Notes ({mode}, {completion})")
    notes_table.add_column("#", justify="right", style="bold blue")
    notes_table.add_column("ID", style="cyan")
    notes_table.add_column("Text")
    notes_table.add_column("Project", style="magenta")
    notes_table.add_column("Done", justify="center")

    for note in view.notes:
        step = path_position(view.path, note.id)
        notes_table.add_row(
            str(step) if step else "",
            note.id,
            note.text,
            note.project_id,
            "✓" if note.completed else "",
        )
    console.print(notes_table)

    if view.connections:
        conn_table = Table(title="Connections")
        conn_table.add_column("ID", style="dim")
        conn_table.add_column("From", style="cyan")
        conn_table.add_column("To", style="cyan")
        conn_table.add_column("Kind")
        for conn in view.connections:
            kind = classify_connection(conn, by_id)
            style = "red" if kind.value == "cross_project" else "blue"
            conn_table.add_row(conn.id, conn.from_id, conn.to_id, f"[{style}]{kind.value}[/{style}]")
        console.print(conn_table)
    else:
        console.print("[dim]No visible connections[/dim]")

    if view.path:
        console.print(f"[bold]Path ({active}):[/bold] " + " → ".join(view.path))

    stats = store.get_stats()
    console.print(
        f"[dim]{stats['total_projects']} projects, {stats['total_notes']} notes, "
        f"{stats['total_connections']} connections "
        f"({stats['cross_project_connections']} cross-project)[/dim]"
    )
