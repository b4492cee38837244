"""
Interaction State Machine.

Turns clicks on the note network into graph mutations. The machine has two
mutually exclusive modes:

- LinkMode (default): pick two notes one after the other to connect them.
  Clicking the selected note again deselects it.
- CheckpointMode: every click toggles the note's membership in the active
  project's path (append when absent, remove when present). Each click pushes
  the pre-click path onto an undo stack; the stack is discarded when the mode
  is turned off.

`transition` is pure: it reads the graph through a narrow protocol and returns
the next state plus the effects to apply. `InteractionController` owns a
GraphStore and applies those effects, which is what a UI layer talks to.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Protocol, Tuple, Union

from ..core.store import GraphStore

logger = logging.getLogger(__name__)


class GraphReader(Protocol):
    """The read-only slice of the store the machine needs."""

    def has_connection(self, a: str, b: str) -> bool: ...

    def get_path(self, project_id: Optional[str]) -> List[str]: ...


# =============================================================================
# States
# =============================================================================

@dataclass(frozen=True)
class LinkMode:
    """Connect notes pairwise. selected is None while idle."""
    project_id: Optional[str] = None
    selected: Optional[str] = None

    @property
    def is_idle(self) -> bool:
        return self.selected is None


@dataclass(frozen=True)
class CheckpointMode:
    """Edit the active project's path, with an undo stack of path snapshots."""
    project_id: Optional[str] = None
    history: Tuple[Tuple[str, ...], ...] = ()

    @property
    def can_undo(self) -> bool:
        return bool(self.history)


InteractionState = Union[LinkMode, CheckpointMode]


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class NoteClicked:
    note_id: str


@dataclass(frozen=True)
class UndoRequested:
    pass


@dataclass(frozen=True)
class CheckpointToggled:
    enabled: bool


@dataclass(frozen=True)
class ProjectChanged:
    project_id: Optional[str]


@dataclass(frozen=True)
class ViewLeft:
    pass


Event = Union[NoteClicked, UndoRequested, CheckpointToggled, ProjectChanged, ViewLeft]


# =============================================================================
# Effects
# =============================================================================

@dataclass(frozen=True)
class AddConnection:
    from_id: str
    to_id: str


@dataclass(frozen=True)
class SetPath:
    project_id: str
    ids: Tuple[str, ...]


Effect = Union[AddConnection, SetPath]


@dataclass(frozen=True)
class Transition:
    state: InteractionState
    effects: Tuple[Effect, ...] = ()


# =============================================================================
# Transitions
# =============================================================================

def toggle_membership(path: List[str], note_id: str) -> List[str]:
    """Remove note_id if it is on the path, otherwise append it."""
    if note_id in path:
        return [i for i in path if i != note_id]
    return [*path, note_id]


def _link_click(state: LinkMode, note_id: str, graph: GraphReader) -> Transition:
    if state.selected is None:
        return Transition(replace(state, selected=note_id))

    if state.selected == note_id:
        return Transition(replace(state, selected=None))

    idle = replace(state, selected=None)
    if graph.has_connection(state.selected, note_id):
        return Transition(idle)
    return Transition(idle, (AddConnection(state.selected, note_id),))


def _checkpoint_click(state: CheckpointMode, note_id: str, graph: GraphReader) -> Transition:
    if state.project_id is None:
        return Transition(state)

    current = graph.get_path(state.project_id)
    next_state = replace(state, history=state.history + (tuple(current),))
    new_path = toggle_membership(current, note_id)
    return Transition(next_state, (SetPath(state.project_id, tuple(new_path)),))


def _undo(state: InteractionState) -> Transition:
    if not isinstance(state, CheckpointMode) or not state.history or state.project_id is None:
        return Transition(state)

    previous = state.history[-1]
    return Transition(
        replace(state, history=state.history[:-1]),
        (SetPath(state.project_id, previous),),
    )


def transition(state: InteractionState, event: Event, graph: GraphReader) -> Transition:
    """
    Compute the next state and the graph effects for an event.

    Never raises: events that do not apply in the current state leave it
    unchanged and produce no effects.
    """
    if isinstance(event, NoteClicked):
        if isinstance(state, CheckpointMode):
            return _checkpoint_click(state, event.note_id, graph)
        return _link_click(state, event.note_id, graph)

    if isinstance(event, UndoRequested):
        return _undo(state)

    if isinstance(event, CheckpointToggled):
        if event.enabled and isinstance(state, LinkMode):
            return Transition(CheckpointMode(project_id=state.project_id))
        if not event.enabled and isinstance(state, CheckpointMode):
            # The path stays as edited; only the history goes.
            return Transition(LinkMode(project_id=state.project_id))
        return Transition(state)

    if isinstance(event, ProjectChanged):
        if event.project_id == state.project_id:
            return Transition(state)
        if isinstance(state, CheckpointMode):
            return Transition(CheckpointMode(project_id=event.project_id))
        return Transition(LinkMode(project_id=event.project_id))

    if isinstance(event, ViewLeft):
        return Transition(LinkMode(project_id=state.project_id))

    return Transition(state)


# =============================================================================
# Controller
# =============================================================================

class InteractionController:
    """
    Owns the interaction state for one view and applies its effects to a
    GraphStore.
    """

    def __init__(
        self,
        store: GraphStore,
        project_id: Optional[str] = None,
        state: Optional[InteractionState] = None,
    ):
        self._store = store
        self._state: InteractionState = state or LinkMode(project_id=project_id)

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def project_id(self) -> Optional[str]:
        return self._state.project_id

    @property
    def checkpoint_mode(self) -> bool:
        return isinstance(self._state, CheckpointMode)

    @property
    def selected(self) -> Optional[str]:
        if isinstance(self._state, LinkMode):
            return self._state.selected
        return None

    @property
    def history_depth(self) -> int:
        if isinstance(self._state, CheckpointMode):
            return len(self._state.history)
        return 0

    @property
    def path(self) -> List[str]:
        return self._store.get_path(self.project_id)

    def dispatch(self, event: Event) -> Transition:
        result = transition(self._state, event, self._store)
        for effect in result.effects:
            self._apply(effect)
        if result.state != self._state:
            logger.debug("%s: %s -> %s", type(event).__name__, self._state, result.state)
        self._state = result.state
        return result

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, AddConnection):
            self._store.add_connection(effect.from_id, effect.to_id)
        elif isinstance(effect, SetPath):
            self._store.set_path(effect.project_id, effect.ids)

    # -------------------------------------------------------------------------
    # Convenience API
    # -------------------------------------------------------------------------

    def click(self, note_id: str) -> Transition:
        return self.dispatch(NoteClicked(note_id))

    def undo(self) -> Transition:
        return self.dispatch(UndoRequested())

    def undo_path(self, project_id: str) -> Transition:
        """Undo the last path edit of project_id; no-op for any other project."""
        if project_id != self.project_id:
            return Transition(self._state)
        return self.undo()

    def set_checkpoint_mode(self, enabled: bool) -> Transition:
        return self.dispatch(CheckpointToggled(enabled))

    def toggle_checkpoint_mode(self) -> Transition:
        return self.set_checkpoint_mode(not self.checkpoint_mode)

    def select_project(self, project_id: Optional[str]) -> Transition:
        return self.dispatch(ProjectChanged(project_id))

    def leave_view(self) -> Transition:
        return self.dispatch(ViewLeft())
