"""
Graph Store implementation.

This module owns the canonical notes, connections and paths of every project
and keeps them consistent:
- At most one connection per unordered pair of notes (indexed with an
  undirected NetworkX graph).
- Deleting a note cascades to its direct children, to every connection that
  touches a deleted note, and to every path that lists one.
- Paths are ordered, per project, and replaced atomically.

The store does no IO; callers load it from and save it to wherever they keep
their data (see core.snapshot).
"""

import logging
import uuid
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Optional

import networkx as nx

from .types import Connection, Note, Project

logger = logging.getLogger(__name__)


def _default_connection_id() -> str:
    return f"conn-{uuid.uuid4().hex[:12]}"


class GraphStore:
    """
    Canonical note graph for all projects.

    Features:
    - Order-insensitive connection lookup via an undirected adjacency index
    - Owner index mapping each note id to its project
    - Cascading deletes for notes and projects
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._projects: Dict[str, Project] = {}
        self._notes: Dict[str, Dict[str, Note]] = defaultdict(dict)
        self._owner: Dict[str, str] = {}
        self._connections: Dict[str, Connection] = {}
        self._adjacency = nx.Graph()
        self._paths: Dict[str, List[str]] = {}
        self._id_factory = id_factory or _default_connection_id

    # =========================================================================
    # Projects & Notes
    # =========================================================================

    def add_project(self, project: Project) -> None:
        """Add or update a project. Insertion order is the merged-view order."""
        self._projects[project.id] = project

    def get_project(self, project_id: str) -> Optional[Project]:
        return self._projects.get(project_id)

    @property
    def projects(self) -> List[Project]:
        return list(self._projects.values())

    def add_note(self, project_id: str, note: Note) -> None:
        """
        Add or update a note under a project.

        A note id belongs to exactly one project; re-adding it under another
        project moves it.
        """
        previous = self._owner.get(note.id)
        if previous is not None and previous != project_id:
            logger.debug("Moving note %s from %s to %s", note.id, previous, project_id)
            self._notes[previous].pop(note.id, None)

        self._notes[project_id][note.id] = note
        self._owner[note.id] = project_id

    def get_note(self, note_id: str) -> Optional[Note]:
        owner = self._owner.get(note_id)
        if owner is None:
            return None
        return self._notes[owner].get(note_id)

    def has_note(self, note_id: str) -> bool:
        return note_id in self._owner

    def project_of(self, note_id: str) -> Optional[str]:
        """Return the id of the project owning note_id."""
        return self._owner.get(note_id)

    def notes_for(self, project_id: str) -> List[Note]:
        """Notes of a project in insertion order; empty for unknown projects."""
        if project_id not in self._notes:
            return []
        return list(self._notes[project_id].values())

    @property
    def notes_by_project(self) -> Dict[str, List[Note]]:
        return {pid: list(notes.values()) for pid, notes in self._notes.items()}

    def toggle_completion(self, note_id: str) -> Optional[Note]:
        """Flip a note's completed flag. Returns the updated note."""
        note = self.get_note(note_id)
        if note is None:
            return None
        updated = note.model_copy(update={"completed": not note.completed})
        self._notes[self._owner[note_id]][note_id] = updated
        return updated

    def delete_note(self, note_id: str) -> List[str]:
        """
        Delete a note and its direct children.

        References are pruned before the notes themselves are removed.

        Returns:
            The ids that were deleted, parent first.
        """
        owner = self._owner.get(note_id)
        if owner is None:
            return []

        doomed = [note_id] + [
            n.id for n in self._notes[owner].values() if n.parent_id == note_id
        ]
        for nid in doomed:
            self.prune_references(nid)
        for nid in doomed:
            self._notes[owner].pop(nid, None)
            self._owner.pop(nid, None)

        logger.debug("Deleted notes %s from project %s", doomed, owner)
        return doomed

    def delete_project(self, project_id: str) -> None:
        """
        Delete a project with its notes, its path, and every connection that
        touches one of its notes.
        """
        for note_id in list(self._notes.get(project_id, {})):
            self.remove_connections_touching(note_id)
            self._remove_from_paths(note_id)
            self._owner.pop(note_id, None)

        self._notes.pop(project_id, None)
        self._paths.pop(project_id, None)
        self._projects.pop(project_id, None)
        logger.debug("Deleted project %s", project_id)

    # =========================================================================
    # Connections
    # =========================================================================

    def add_connection(self, from_id: str, to_id: str) -> Optional[Connection]:
        """
        Connect two notes.

        Self-loops and pairs that are already connected (in either direction)
        are ignored.

        Returns:
            The new Connection, or None when nothing was added.
        """
        if from_id == to_id:
            logger.debug("Ignoring self-loop on %s", from_id)
            return None
        if self.has_connection(from_id, to_id):
            logger.debug("Ignoring duplicate connection %s <-> %s", from_id, to_id)
            return None

        conn_id = self._id_factory()
        while conn_id in self._connections:
            conn_id = self._id_factory()

        conn = Connection(id=conn_id, from_id=from_id, to_id=to_id)
        self._insert_connection(conn)
        return conn

    def load_connection(self, conn: Connection) -> bool:
        """
        Insert an already-identified connection (e.g. from a snapshot).

        Returns False when it would violate the one-edge-per-pair rule.
        """
        if conn.from_id == conn.to_id or self.has_connection(conn.from_id, conn.to_id):
            logger.debug("Dropping invalid stored connection %s", conn.id)
            return False
        if conn.id in self._connections:
            logger.debug("Dropping connection with reused id %s", conn.id)
            return False
        self._insert_connection(conn)
        return True

    def _insert_connection(self, conn: Connection) -> None:
        self._connections[conn.id] = conn
        self._adjacency.add_edge(conn.from_id, conn.to_id, conn_id=conn.id)

    def has_connection(self, a: str, b: str) -> bool:
        """Check whether a and b are connected, in either direction."""
        return self._adjacency.has_edge(a, b)

    def get_connection(self, a: str, b: str) -> Optional[Connection]:
        if not self._adjacency.has_edge(a, b):
            return None
        return self._connections.get(self._adjacency.edges[a, b]["conn_id"])

    def neighbors(self, note_id: str) -> List[str]:
        """Ids of every note connected to note_id."""
        if note_id not in self._adjacency:
            return []
        return list(self._adjacency.neighbors(note_id))

    def remove_connections_touching(self, note_id: str) -> int:
        """
        Remove every connection with note_id at either end.

        Returns:
            Number of connections removed.
        """
        if note_id not in self._adjacency:
            return 0

        removed = 0
        for _, _, conn_id in list(self._adjacency.edges(note_id, data="conn_id")):
            self._connections.pop(conn_id, None)
            removed += 1
        self._adjacency.remove_node(note_id)
        return removed

    @property
    def connections(self) -> List[Connection]:
        return list(self._connections.values())

    # =========================================================================
    # Paths
    # =========================================================================

    def set_path(self, project_id: str, ids: Iterable[str]) -> None:
        """Replace a project's path. De-duplication is the caller's job."""
        self._paths[project_id] = list(ids)

    def get_path(self, project_id: Optional[str]) -> List[str]:
        if project_id is None:
            return []
        return list(self._paths.get(project_id, []))

    @property
    def paths(self) -> Dict[str, List[str]]:
        return {pid: list(ids) for pid, ids in self._paths.items()}

    def _remove_from_paths(self, note_id: str) -> None:
        for project_id, ids in self._paths.items():
            if note_id in ids:
                self._paths[project_id] = [i for i in ids if i != note_id]

    # =========================================================================
    # Cascade
    # =========================================================================

    def prune_references(self, note_id: str) -> None:
        """
        Drop every reference to note_id from connections and paths.

        Runs as part of note deletion, before the note itself goes away.
        """
        removed = self.remove_connections_touching(note_id)
        self._remove_from_paths(note_id)
        logger.debug("Pruned %s (%d connections)", note_id, removed)

    # =========================================================================
    # Export
    # =========================================================================

    @property
    def note_count(self) -> int:
        return len(self._owner)

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def get_stats(self) -> Dict[str, Any]:
        """Summary counts, per project and overall."""
        notes_by_project = {pid: len(notes) for pid, notes in self._notes.items()}
        cross = sum(
            1 for c in self._connections.values()
            if self._owner.get(c.from_id) != self._owner.get(c.to_id)
        )
        return {
            "total_projects": len(self._projects),
            "total_notes": self.note_count,
            "total_connections": self.connection_count,
            "cross_project_connections": cross,
            "notes_by_project": notes_by_project,
            "path_lengths": {pid: len(ids) for pid, ids in self._paths.items()},
        }
