"""
Delete Command - Remove notes or projects with their references.
"""

import click

from ..utils import echo_error, echo_info, echo_success, load_store, save_store


@click.command()
@click.argument("note_id")
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def delete(note_id: str, snapshot: str):
    """
    Delete NOTE_ID, its sub-notes, and every connection and path step that
    refers to them.
    """
    store = load_store(snapshot)
    if store is None:
        return

    if not store.has_note(note_id):
        echo_error(f"Note not found: {note_id}")
        return

    deleted = store.delete_note(note_id)
    save_store(store, snapshot)
    echo_success(f"Deleted {len(deleted)} note(s)")
    for nid in deleted:
        echo_info(nid)


@click.command("delete-project")
@click.argument("project_id")
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def delete_project(project_id: str, snapshot: str):
    """
    Delete PROJECT_ID with its notes, its path and every connection touching
    its notes.
    """
    store = load_store(snapshot)
    if store is None:
        return

    if store.get_project(project_id) is None:
        echo_error(f"Project not found: {project_id}")
        return

    note_count = len(store.notes_for(project_id))
    store.delete_project(project_id)
    save_store(store, snapshot)
    echo_success(f"Deleted project {project_id} ({note_count} notes)")
