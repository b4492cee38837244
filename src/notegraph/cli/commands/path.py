"""
Path Command - Inspect and edit a project's checkpoint path.

Usage:
    notegraph path show PROJECT               # Print the ordered steps
    notegraph path set PROJECT N1 N2 N3       # Replace the path
    notegraph path toggle PROJECT N2 N4       # Click notes as in path editing mode
"""

from typing import Tuple

import click
from rich.console import Console
from rich.tree import Tree

from ...interaction.machine import InteractionController
from ..utils import echo_error, echo_success, echo_warning, load_store, save_store

console = Console()


@click.group()
def path():
    """
    Inspect and edit checkpoint paths.
    """
    pass


@path.command("show")
@click.argument("project_id")
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def path_show(project_id: str, snapshot: str):
    """Show the ordered path of PROJECT_ID."""
    store = load_store(snapshot)
    if store is None:
        return

    project = store.get_project(project_id)
    if project is None:
        echo_error(f"Project not found: {project_id}")
        return

    tree = Tree(f"{project.icon} [bold]{project.name}[/bold]")
    steps = store.get_path(project_id)
    if not steps:
        tree.add("[dim]No path[/dim]")
    for index, note_id in enumerate(steps, start=1):
        note = store.get_note(note_id)
        if note is None:
            tree.add(f"[red]{index}. {note_id} (missing)[/red]")
        else:
            mark = " [green]✓[/green]" if note.completed else ""
            tree.add(f"[bold blue]{index}.[/bold blue] {note.text} [dim]({note_id})[/dim]{mark}")
    console.print(tree)


@path.command("set")
@click.argument("project_id")
@click.argument("note_ids", nargs=-1)
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def path_set(project_id: str, note_ids: Tuple[str, ...], snapshot: str):
    """Replace the path of PROJECT_ID with NOTE_IDS, in order."""
    store = load_store(snapshot)
    if store is None:
        return

    if store.get_project(project_id) is None:
        echo_error(f"Project not found: {project_id}")
        return

    foreign = [nid for nid in note_ids if store.project_of(nid) != project_id]
    if foreign:
        echo_error(f"Not notes of {project_id}: {', '.join(foreign)}")
        return

    unique = list(dict.fromkeys(note_ids))
    if len(unique) != len(note_ids):
        echo_warning("Repeated notes were dropped from the path.")

    store.set_path(project_id, unique)
    save_store(store, snapshot)
    echo_success(f"Path of {project_id}: {' → '.join(unique) or '(empty)'}")


@path.command("toggle")
@click.argument("project_id")
@click.argument("note_ids", nargs=-1, required=True)
@click.option("--undo", "undo_count", type=int, default=0, help="Undo this many edits afterwards")
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def path_toggle(project_id: str, note_ids: Tuple[str, ...], undo_count: int, snapshot: str):
    """
    Toggle NOTE_IDS on the path of PROJECT_ID, one click each.

    Notes already on the path are removed, others are appended.
    """
    store = load_store(snapshot)
    if store is None:
        return

    if store.get_project(project_id) is None:
        echo_error(f"Project not found: {project_id}")
        return

    foreign = [nid for nid in note_ids if store.project_of(nid) != project_id]
    if foreign:
        echo_error(f"Not notes of {project_id}: {', '.join(foreign)}")
        return

    controller = InteractionController(store, project_id=project_id)
    controller.set_checkpoint_mode(True)
    for note_id in note_ids:
        controller.click(note_id)
    for _ in range(undo_count):
        controller.undo()

    save_store(store, snapshot)
    echo_success(f"Path of {project_id}: {' → '.join(controller.path) or '(empty)'}")
