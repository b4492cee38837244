"""
Layout Command - Print computed node positions.
"""

import json

import click
from rich.console import Console
from rich.table import Table

from ...core.types import CompletionFilter, ViewMode
from ...layout.circular import compute_layout
from ...view.composer import compose_view
from ..utils import load_cli_config, load_store, resolve_project, view_options

console = Console()


@click.command()
@click.argument("snapshot", default=".")
@view_options
@click.option("--json", "as_json", is_flag=True, help="Output positions as JSON")
def layout(snapshot: str, project_id: str, mode: str, completion: str, as_json: bool):
    """
    Compute the clustered circular layout of a view.
    """
    store = load_store(snapshot)
    if store is None:
        return

    active = resolve_project(store, project_id)
    if project_id is not None and active is None:
        return

    config = load_cli_config()
    if config is None:
        return

    view = compose_view(store, ViewMode(mode), CompletionFilter(completion), active)
    positions = compute_layout(view.notes, config.layout)

    if as_json:
        click.echo(json.dumps(
            {nid: pos.model_dump() for nid, pos in positions.items()}, indent=2
        ))
        return

    table = Table(title=f"Layout ({config.layout.width:g}×{config.layout.height:g})")
    table.add_column("ID", style="cyan")
    table.add_column("Project", style="magenta")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for note in view.notes:
        pos = positions[note.id]
        table.add_row(note.id, note.project_id, f"{pos.x:.2f}", f"{pos.y:.2f}")
    console.print(table)
