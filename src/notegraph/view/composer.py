"""
View Composer.

Derives what the note network should show for a given view configuration:
- The base note set (the active project, or every project merged), each note
  tagged with its owning project's id and color.
- The completion filter applied to that set.
- Only the connections whose two endpoints survived filtering.
- The active project's path, unfiltered.

Tagging is a join done here on every composition; the project id is never
stored on the note.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from ..core.store import GraphStore
from ..core.types import (
    CompletionFilter,
    ComposedView,
    Connection,
    EdgeKind,
    TaggedNote,
    ViewMode,
)

logger = logging.getLogger(__name__)


def _tagged_notes(store: GraphStore, project_id: str) -> List[TaggedNote]:
    project = store.get_project(project_id)
    if project is None:
        return []
    return [TaggedNote.tag(note, project) for note in store.notes_for(project_id)]


def compose_view(
    store: GraphStore,
    mode: ViewMode = ViewMode.SINGLE,
    filter: CompletionFilter = CompletionFilter.ALL,
    active_project_id: Optional[str] = None,
) -> ComposedView:
    """
    Build the render-ready note, connection and path sets.

    In single mode an unknown or missing active project yields an empty view.
    The path always belongs to the active project and ignores the filter;
    steps that are not on screen simply draw no segment.
    """
    if mode == ViewMode.MERGED:
        base: List[TaggedNote] = []
        for project in store.projects:
            base.extend(_tagged_notes(store, project.id))
    else:
        if active_project_id is None or store.get_project(active_project_id) is None:
            return ComposedView()
        base = _tagged_notes(store, active_project_id)

    notes = [n for n in base if filter.accepts(n.completed)]
    visible = {n.id for n in notes}
    connections = [
        c for c in store.connections
        if c.from_id in visible and c.to_id in visible
    ]

    return ComposedView(
        notes=notes,
        connections=connections,
        path=store.get_path(active_project_id),
    )


def classify_connection(conn: Connection, notes_by_id: Mapping[str, TaggedNote]) -> EdgeKind:
    """Cross-project when the two endpoints are owned by different projects."""
    source = notes_by_id.get(conn.from_id)
    target = notes_by_id.get(conn.to_id)
    source_project = source.project_id if source else None
    target_project = target.project_id if target else None
    if source_project != target_project:
        return EdgeKind.CROSS_PROJECT
    return EdgeKind.INTRA_PROJECT


def path_segments(path: List[str], present: Iterable[str]) -> List[tuple[str, str]]:
    """
    Consecutive (from, to) pairs of a path, skipping any pair with an endpoint
    that is not present.
    """
    present_ids = set(present)
    return [
        (a, b) for a, b in zip(path, path[1:])
        if a in present_ids and b in present_ids
    ]


def path_position(path: List[str], note_id: str) -> Optional[int]:
    """1-based position of note_id on the path, None when absent."""
    try:
        return path.index(note_id) + 1
    except ValueError:
        return None


def index_notes(notes: Iterable[TaggedNote]) -> Dict[str, TaggedNote]:
    return {n.id: n for n in notes}
