"""
Core type definitions for notegraph.

Persisted names use the organizer's camelCase keys (createdAt, fromId, ...)
through aliases; Python code uses the snake_case attribute names.
"""

import time
from enum import StrEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _now_ms() -> int:
    return int(time.time() * 1000)


class ViewMode(StrEnum):
    """Which notes the network shows."""
    SINGLE = "single"
    MERGED = "merged"


class CompletionFilter(StrEnum):
    """Completion state filter applied before layout."""
    ALL = "all"
    UNSOLVED = "unsolved"
    SOLVED = "solved"

    def accepts(self, completed: bool) -> bool:
        if self is CompletionFilter.UNSOLVED:
            return not completed
        if self is CompletionFilter.SOLVED:
            return completed
        return True


class EdgeKind(StrEnum):
    """Visual classification of a link connection."""
    CROSS_PROJECT = "cross_project"
    INTRA_PROJECT = "intra_project"


class Note(BaseModel):
    """
    A single note owned by exactly one project.
    """
    id: str
    text: str
    created_at: int = Field(default_factory=_now_ms, alias="createdAt")
    completed: bool = False
    parent_id: Optional[str] = Field(default=None, alias="parentId")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Note):
            return self.id == other.id
        return False


class TaggedNote(Note):
    """
    A Note joined with its owning project at composition time.

    Never stored: the project id is derived from which project's note list the
    note came from.
    """
    project_id: str = Field(alias="projectId")
    project_color: str = Field(default="", alias="projectColor")

    @classmethod
    def tag(cls, note: Note, project: "Project") -> "TaggedNote":
        return cls(
            **note.model_dump(),
            project_id=project.id,
            project_color=project.color,
        )


class Connection(BaseModel):
    """
    Undirected association between two notes.

    (a, b) and (b, a) denote the same edge.
    """
    id: str
    from_id: str = Field(alias="fromId")
    to_id: str = Field(alias="toId")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def key(self) -> frozenset:
        """Order-insensitive identity of the edge."""
        return frozenset((self.from_id, self.to_id))

    def touches(self, note_id: str) -> bool:
        return self.from_id == note_id or self.to_id == note_id

    def other_end(self, note_id: str) -> Optional[str]:
        if self.from_id == note_id:
            return self.to_id
        if self.to_id == note_id:
            return self.from_id
        return None


class Project(BaseModel):
    """Opaque to the graph beyond its id (grouping) and color (rendering)."""
    id: str
    name: str
    color: str = ""
    icon: str = ""
    url: str = "#"
    description: str = ""

    model_config = ConfigDict(extra="ignore")


class Position(BaseModel):
    """A point on the logical canvas."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class ComposedView(BaseModel):
    """
    Render-ready note, edge and path sets for one view configuration.
    """
    notes: List[TaggedNote] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)

    @property
    def note_ids(self) -> set[str]:
        return {n.id for n in self.notes}
