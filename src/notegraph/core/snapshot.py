"""
Snapshot codec.

Converts the organizer's persisted collections into a GraphStore and back.
The layout matches what the front-end keeps in local storage:

    {
        "project_list": [{"id": ..., "name": ..., "color": ...}, ...],
        "project_notes": {"<project id>": [{"id": ..., "text": ..., "createdAt": ...}]},
        "project_connections": [{"id": ..., "fromId": ..., "toId": ...}],
        "project_paths": {"<project id>": ["<note id>", ...]}
    }

Parsing returns a Result instead of raising, so callers at the edge decide how
to report a bad file.
"""

import json
import logging
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .result import Err, Ok, Result
from .store import GraphStore
from .types import Connection, Note, Project

logger = logging.getLogger(__name__)


class Snapshot(BaseModel):
    """Everything the graph subsystem needs from persistence."""
    projects: List[Project] = Field(default_factory=list, alias="project_list")
    notes: Dict[str, List[Note]] = Field(default_factory=dict, alias="project_notes")
    connections: List[Connection] = Field(default_factory=list, alias="project_connections")
    paths: Dict[str, List[str]] = Field(default_factory=dict, alias="project_paths")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def parse_snapshot(text: str) -> Result[Snapshot]:
    """Parse and validate snapshot JSON."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        return Err("Snapshot must be a JSON object")

    try:
        return Ok(Snapshot.model_validate(data))
    except ValidationError as e:
        return Err(f"Invalid snapshot: {e.error_count()} validation error(s)\n{e}")


def dump_snapshot(snapshot: Snapshot) -> str:
    return snapshot.model_dump_json(by_alias=True, indent=2)


def _unique(ids: List[str]) -> List[str]:
    return list(dict.fromkeys(ids))


def build_store(
    snapshot: Snapshot, id_factory: Optional[Callable[[], str]] = None
) -> GraphStore:
    """
    Hydrate a GraphStore from a snapshot.

    Stored connections that break the one-edge-per-pair rule are dropped and
    repeated path entries are collapsed. Path ids that no longer resolve to a
    note are kept; only a delete prunes them.
    """
    store = GraphStore(id_factory=id_factory)

    for project in snapshot.projects:
        store.add_project(project)

    for project_id, notes in snapshot.notes.items():
        for note in notes:
            store.add_note(project_id, note)

    dropped = sum(1 for conn in snapshot.connections if not store.load_connection(conn))
    if dropped:
        logger.warning("Dropped %d invalid connection(s) while loading snapshot", dropped)

    for project_id, ids in snapshot.paths.items():
        unique = _unique(ids)
        if len(unique) != len(ids):
            logger.warning("Collapsed repeated entries in path of %s", project_id)
        store.set_path(project_id, unique)

    return store


def snapshot_from_store(store: GraphStore) -> Snapshot:
    """Export a GraphStore back into the persisted layout."""
    return Snapshot(
        projects=store.projects,
        notes=store.notes_by_project,
        connections=store.connections,
        paths=store.paths,
    )
