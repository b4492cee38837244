"""Click handling for the note network: link mode and checkpoint (path) mode."""

from .machine import (
    AddConnection,
    CheckpointMode,
    CheckpointToggled,
    InteractionController,
    InteractionState,
    LinkMode,
    NoteClicked,
    ProjectChanged,
    SetPath,
    Transition,
    UndoRequested,
    ViewLeft,
    toggle_membership,
    transition,
)

__all__ = [
    "AddConnection", "CheckpointMode", "CheckpointToggled", "InteractionController",
    "InteractionState", "LinkMode", "NoteClicked", "ProjectChanged", "SetPath",
    "Transition", "UndoRequested", "ViewLeft", "toggle_membership", "transition",
]
