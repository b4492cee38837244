"""
Core modules for notegraph.

This package contains the fundamental building blocks:
- types: Data structures (Note, Connection, Project, ...)
- store: Canonical note graph with cascading deletes
- snapshot: Conversion from and to the persisted layout
- result: Ok/Err type used at the boundaries
"""

from .types import (
    Note, TaggedNote, Connection, Project, Position, ComposedView,
    ViewMode, CompletionFilter, EdgeKind,
)
from .store import GraphStore
from .result import Ok, Err, Result
from .snapshot import Snapshot, parse_snapshot, dump_snapshot, build_store, snapshot_from_store

__all__ = [
    # Types
    "Note", "TaggedNote", "Connection", "Project", "Position", "ComposedView",
    "ViewMode", "CompletionFilter", "EdgeKind",
    # Store
    "GraphStore",
    # Result
    "Ok", "Err", "Result",
    # Snapshot
    "Snapshot", "parse_snapshot", "dump_snapshot", "build_store", "snapshot_from_store",
]
