"""
Connect Command - Link two notes.
"""

import click

from ..utils import echo_error, echo_success, echo_warning, load_store, save_store


@click.command()
@click.argument("from_id")
@click.argument("to_id")
@click.option("-s", "--snapshot", default=".", help="Snapshot file or directory")
def connect(from_id: str, to_id: str, snapshot: str):
    """
    Connect FROM_ID and TO_ID.

    Connections are undirected; connecting an already linked pair or a note
    to itself changes nothing.
    """
    store = load_store(snapshot)
    if store is None:
        return

    for note_id in (from_id, to_id):
        if not store.has_note(note_id):
            echo_error(f"Note not found: {note_id}")
            return

    conn = store.add_connection(from_id, to_id)
    if conn is None:
        if from_id == to_id:
            echo_warning("A note cannot be connected to itself.")
        else:
            echo_warning(f"{from_id} and {to_id} are already connected.")
        return

    save_store(store, snapshot)
    echo_success(f"Connected {from_id} ↔ {to_id} ({conn.id})")
