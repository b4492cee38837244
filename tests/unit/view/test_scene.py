"""Unit tests for the scene builder."""

import pytest

from notegraph.config import NotegraphConfig, RenderConfig
from notegraph.core.types import ComposedView, Connection, EdgeKind, Position, TaggedNote
from notegraph.interaction.machine import CheckpointMode, LinkMode
from notegraph.view.scene import (
    COMPLETED_FILL,
    DEFAULT_FILL,
    EDGE_STYLES,
    HINT_CHECKPOINT,
    HINT_IDLE,
    HINT_PICK_SECOND,
    build_scene,
    resolve_color,
    truncate_label,
)


def note(note_id, project_id="p1", color="bg-blue-600", completed=False, text=None):
    return TaggedNote(
        id=note_id,
        text=text or note_id,
        project_id=project_id,
        project_color=color,
        completed=completed,
    )


@pytest.fixture
def view():
    return ComposedView(
        notes=[
            note("n1", text="A very long note"),
            note("n2", completed=True),
            note("m1", project_id="p2", color="#f43f5e"),
        ],
        connections=[
            Connection(id="c1", from_id="n1", to_id="n2"),
            Connection(id="c2", from_id="n2", to_id="m1"),
        ],
        path=["n1", "m1"],
    )


@pytest.fixture
def positions():
    return {
        "n1": Position(x=10, y=10),
        "n2": Position(x=20, y=20),
        "m1": Position(x=30, y=30),
    }


class TestColors:
    @pytest.mark.parametrize("color,expected", [
        ("#123456", "#123456"),
        ("bg-rose-500", "#f43f5e"),
        ("bg-[#abcdef]", "#abcdef"),
        ("bg-unknown", DEFAULT_FILL),
        ("", DEFAULT_FILL),
    ])
    def test_resolve_color(self, color, expected):
        assert resolve_color(color) == expected

    def test_completed_notes_are_green(self, view, positions):
        scene = build_scene(view, positions)
        fills = {n.id: n.fill for n in scene.nodes}

        assert fills["n2"] == COMPLETED_FILL
        assert fills["n1"] == "#2563eb"
        assert fills["m1"] == "#f43f5e"


class TestLabels:
    def test_truncate(self):
        assert truncate_label("A very long note", 8) == "A very l..."
        assert truncate_label("short", 8) == "short"
        assert truncate_label("exactly8", 8) == "exactly8"

    def test_label_length_from_config(self, view, positions):
        config = NotegraphConfig(render=RenderConfig(label_max_chars=3))
        scene = build_scene(view, positions, config=config)
        assert scene.nodes[0].label == "A v..."
        assert scene.nodes[0].text == "A very long note"


class TestLinkModeScene:
    def test_edges_styled_by_kind(self, view, positions):
        scene = build_scene(view, positions, LinkMode("p1"))
        kinds = {e.id: e.kind for e in scene.edges}

        assert kinds == {"c1": EdgeKind.INTRA_PROJECT, "c2": EdgeKind.CROSS_PROJECT}
        cross = next(e for e in scene.edges if e.id == "c2")
        assert cross.style == EDGE_STYLES[EdgeKind.CROSS_PROJECT]
        assert cross.start == positions["n2"]

    def test_badges_and_segments(self, view, positions):
        scene = build_scene(view, positions, LinkMode("p1"))
        badges = {n.id: n.badge for n in scene.nodes}

        assert badges == {"n1": 1, "n2": None, "m1": 2}
        assert [(s.from_id, s.to_id) for s in scene.segments] == [("n1", "m1")]

    def test_selected_note_highlighted(self, view, positions):
        scene = build_scene(view, positions, LinkMode("p1", selected="n2"))

        assert [n.id for n in scene.nodes if n.selected] == ["n2"]
        assert scene.hint == HINT_PICK_SECOND

    def test_idle_hint_and_no_path_controls(self, view, positions):
        scene = build_scene(view, positions)

        assert scene.hint == HINT_IDLE
        assert not scene.checkpoint_mode
        assert not scene.show_undo
        assert not scene.show_path_list


class TestCheckpointScene:
    def test_hides_link_edges(self, view, positions):
        scene = build_scene(view, positions, CheckpointMode("p1"))

        assert scene.edges == []
        assert len(scene.segments) == 1
        assert scene.hint == HINT_CHECKPOINT

    def test_path_members_highlighted(self, view, positions):
        scene = build_scene(view, positions, CheckpointMode("p1"))
        assert {n.id for n in scene.nodes if n.selected} == {"n1", "m1"}

    def test_undo_shown_only_with_history(self, view, positions):
        assert not build_scene(view, positions, CheckpointMode("p1")).show_undo
        scene = build_scene(view, positions, CheckpointMode("p1", history=(("n1",),)))
        assert scene.show_undo
        assert scene.show_path_list


class TestMissingPositions:
    def test_unpositioned_notes_are_skipped(self, view, positions):
        del positions["m1"]
        scene = build_scene(view, positions)

        assert [n.id for n in scene.nodes] == ["n1", "n2"]
        assert [e.id for e in scene.edges] == ["c1"]
        assert scene.segments == []

    def test_canvas_size_from_config(self, view, positions):
        scene = build_scene(view, positions)
        assert (scene.width, scene.height) == (300, 220)
