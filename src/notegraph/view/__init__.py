"""View composition and scene assembly for the note network."""

from .composer import (
    classify_connection,
    compose_view,
    index_notes,
    path_position,
    path_segments,
)
from .scene import EdgeStyle, PathSegment, Scene, SceneEdge, SceneNode, build_scene

__all__ = [
    "classify_connection", "compose_view", "index_notes", "path_position", "path_segments",
    "EdgeStyle", "PathSegment", "Scene", "SceneEdge", "SceneNode", "build_scene",
]
