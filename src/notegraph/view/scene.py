"""
Scene Builder.

Joins a composed view, a layout and the interaction state into everything a
renderer has to draw: positioned nodes with badges and highlight flags, styled
link edges, directed path segments, and the hint line under the network.

Edge rules:
- Link connections are drawn only outside checkpoint mode. Cross-project
  links are emphasized (solid, red), intra-project links are muted (dashed,
  blue).
- Path segments are drawn in traversal order whenever both endpoints are on
  screen, regardless of project boundaries.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..config import NotegraphConfig
from ..core.types import ComposedView, EdgeKind, Position
from ..interaction.machine import CheckpointMode, InteractionState, LinkMode
from .composer import classify_connection, index_notes, path_position, path_segments

COMPLETED_FILL = "#34d399"
DEFAULT_FILL = "#2563eb"
PATH_STROKE = "#3b82f6"

HINT_CHECKPOINT = "Path editing: click a note to add or remove it"
HINT_PICK_SECOND = "Pick the second note"
HINT_IDLE = "Interact with the network"

# Tailwind background classes used for project colors
TAILWIND_COLORS: Dict[str, str] = {
    "bg-blue-600": "#2563eb",
    "bg-emerald-500": "#10b981",
    "bg-rose-500": "#f43f5e",
    "bg-amber-500": "#f59e0b",
    "bg-violet-600": "#7c3aed",
    "bg-cyan-500": "#06b6d4",
    "bg-orange-500": "#f97316",
    "bg-pink-500": "#ec4899",
}

_ARBITRARY_COLOR = re.compile(r"^bg-\[(#[0-9a-fA-F]{3,8})\]$")


class EdgeStyle(BaseModel):
    stroke: str
    width: float
    dash: str = ""


EDGE_STYLES: Dict[EdgeKind, EdgeStyle] = {
    EdgeKind.CROSS_PROJECT: EdgeStyle(stroke="rgba(239, 68, 68, 0.4)", width=2.0),
    EdgeKind.INTRA_PROJECT: EdgeStyle(stroke="rgba(59, 130, 246, 0.2)", width=1.5, dash="4 2"),
}


class SceneNode(BaseModel):
    id: str
    label: str
    text: str
    x: float
    y: float
    fill: str
    project_id: str
    completed: bool = False
    selected: bool = False
    badge: Optional[int] = None


class SceneEdge(BaseModel):
    id: str
    from_id: str
    to_id: str
    kind: EdgeKind
    start: Position
    end: Position
    style: EdgeStyle


class PathSegment(BaseModel):
    index: int
    from_id: str
    to_id: str
    start: Position
    end: Position


class Scene(BaseModel):
    width: float
    height: float
    nodes: List[SceneNode] = Field(default_factory=list)
    edges: List[SceneEdge] = Field(default_factory=list)
    segments: List[PathSegment] = Field(default_factory=list)
    hint: str = HINT_IDLE
    checkpoint_mode: bool = False
    show_undo: bool = False
    show_path_list: bool = False


def resolve_color(color: str) -> str:
    """Turn a project color (hex or Tailwind class) into a hex fill."""
    if color.startswith("#"):
        return color
    if color in TAILWIND_COLORS:
        return TAILWIND_COLORS[color]
    match = _ARBITRARY_COLOR.match(color)
    if match:
        return match.group(1)
    return DEFAULT_FILL


def truncate_label(text: str, max_chars: int) -> str:
    if len(text) > max_chars:
        return text[:max_chars] + "..."
    return text


def _hint(state: InteractionState) -> str:
    if isinstance(state, CheckpointMode):
        return HINT_CHECKPOINT
    if state.selected is not None:
        return HINT_PICK_SECOND
    return HINT_IDLE


def build_scene(
    view: ComposedView,
    positions: Dict[str, Position],
    state: Optional[InteractionState] = None,
    config: Optional[NotegraphConfig] = None,
) -> Scene:
    """
    Assemble a drawable scene.

    Notes without a position are skipped, and so is every edge or segment
    that would end on one.
    """
    config = config or NotegraphConfig()
    state = state or LinkMode()
    checkpoint = isinstance(state, CheckpointMode)
    selected_id = state.selected if isinstance(state, LinkMode) else None
    path = view.path

    nodes = []
    for note in view.notes:
        pos = positions.get(note.id)
        if pos is None:
            continue
        badge = path_position(path, note.id)
        nodes.append(SceneNode(
            id=note.id,
            label=truncate_label(note.text, config.render.label_max_chars),
            text=note.text,
            x=pos.x,
            y=pos.y,
            fill=COMPLETED_FILL if note.completed else resolve_color(note.project_color),
            project_id=note.project_id,
            completed=note.completed,
            selected=note.id == selected_id or (checkpoint and badge is not None),
            badge=badge,
        ))

    edges = []
    if not checkpoint:
        by_id = index_notes(view.notes)
        for conn in view.connections:
            start = positions.get(conn.from_id)
            end = positions.get(conn.to_id)
            if start is None or end is None:
                continue
            kind = classify_connection(conn, by_id)
            edges.append(SceneEdge(
                id=conn.id,
                from_id=conn.from_id,
                to_id=conn.to_id,
                kind=kind,
                start=start,
                end=end,
                style=EDGE_STYLES[kind],
            ))

    segments = [
        PathSegment(index=i, from_id=a, to_id=b, start=positions[a], end=positions[b])
        for i, (a, b) in enumerate(path_segments(path, positions))
    ]

    return Scene(
        width=config.layout.width,
        height=config.layout.height,
        nodes=nodes,
        edges=edges,
        segments=segments,
        hint=_hint(state),
        checkpoint_mode=checkpoint,
        show_undo=checkpoint and state.can_undo,
        show_path_list=checkpoint and bool(path),
    )
