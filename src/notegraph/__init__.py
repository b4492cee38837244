"""
notegraph - Note relationship graph and ordered paths.

Projects own notes; notes can be linked pairwise across projects, and each
project can carry one ordered path through its notes. The package keeps that
graph consistent, lays it out, and turns clicks into graph edits.
"""

from .core.store import GraphStore
from .core.types import CompletionFilter, Connection, Note, Project, ViewMode
from .interaction.machine import InteractionController
from .layout.circular import compute_layout
from .view.composer import compose_view
from .view.scene import build_scene

__version__ = "0.3.0"

__all__ = [
    "GraphStore",
    "CompletionFilter",
    "Connection",
    "Note",
    "Project",
    "ViewMode",
    "InteractionController",
    "compute_layout",
    "compose_view",
    "build_scene",
]
