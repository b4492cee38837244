"""
Clustered circular layout.

Places notes on the logical canvas:
- One project present: every note evenly spaced on a single circle around the
  canvas center.
- Several projects present (merged view): each project gets a cluster center
  on an outer circle, and its notes are spaced on a small circle around that
  center.

The function is pure and deterministic for a given input order, so any other
layout with the same signature can replace it.
"""

import math
from typing import Callable, Dict, List, Optional, Sequence

from ..config import LayoutConfig
from ..core.types import Note, Position

LayoutFunction = Callable[[Sequence[Note]], Dict[str, Position]]


def group_by_project(notes: Sequence[Note]) -> Dict[Optional[str], List[Note]]:
    """
    Group notes by their tagged project id, in order of first appearance.

    Untagged notes fall into a single None group.
    """
    groups: Dict[Optional[str], List[Note]] = {}
    for note in notes:
        groups.setdefault(getattr(note, "project_id", None), []).append(note)
    return groups


def _ring(
    notes: Sequence[Note], cx: float, cy: float, radius: float
) -> Dict[str, Position]:
    count = len(notes)
    positions = {}
    for index, note in enumerate(notes):
        angle = (index / count) * math.pi * 2
        positions[note.id] = Position(
            x=cx + radius * math.cos(angle),
            y=cy + radius * math.sin(angle),
        )
    return positions


def compute_layout(
    notes: Sequence[Note], config: Optional[LayoutConfig] = None
) -> Dict[str, Position]:
    """
    Map each note id to a position on the canvas.

    Args:
        notes: Notes to place, usually TaggedNotes from the view composer.
        config: Canvas size and radii; defaults to the built-in geometry.

    Returns:
        A dict of note id to Position. Empty input gives an empty dict.
    """
    config = config or LayoutConfig()
    groups = group_by_project(notes)
    if not groups:
        return {}

    cx, cy = config.center

    if len(groups) == 1:
        (only,) = groups.values()
        return _ring(only, cx, cy, config.single_radius)

    positions: Dict[str, Position] = {}
    group_count = len(groups)
    for group_index, group in enumerate(groups.values()):
        cluster_angle = (group_index / group_count) * math.pi * 2
        gx = cx + config.cluster_radius * math.cos(cluster_angle)
        gy = cy + config.cluster_radius * math.sin(cluster_angle)
        positions.update(_ring(group, gx, gy, config.note_radius))
    return positions
