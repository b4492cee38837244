"""Unit tests for the 'path' command group."""

import json

from notegraph.cli.main import main


def stored_path(snapshot_file, project_id="p1"):
    return json.loads(snapshot_file.read_text())["project_paths"].get(project_id, [])


class TestPathShow:
    def test_lists_steps_in_order(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "show", "p1", "-s", str(snapshot_file)])

        assert result.exit_code == 0
        output = result.output
        assert output.index("Sketch") < output.index("Build") < output.index("Ship")

    def test_empty_path(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "show", "p2", "-s", str(snapshot_file)])
        assert "No path" in result.output

    def test_unknown_project(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "show", "ghost", "-s", str(snapshot_file)])
        assert "Project not found" in result.output


class TestPathSet:
    def test_replaces_path(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "set", "p1", "n4", "n1", "-s", str(snapshot_file)])

        assert result.exit_code == 0
        assert stored_path(snapshot_file) == ["n4", "n1"]

    def test_drops_repeats(self, runner, snapshot_file):
        result = runner.invoke(
            main, ["path", "set", "p1", "n1", "n3", "n1", "-s", str(snapshot_file)]
        )

        assert "Repeated notes" in result.output
        assert stored_path(snapshot_file) == ["n1", "n3"]

    def test_rejects_foreign_notes(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "set", "p1", "n1", "m1", "-s", str(snapshot_file)])

        assert "Not notes of p1: m1" in result.output
        assert stored_path(snapshot_file) == ["n1", "n2", "n3"]

    def test_empty_clears(self, runner, snapshot_file):
        runner.invoke(main, ["path", "set", "p1", "-s", str(snapshot_file)])
        assert stored_path(snapshot_file) == []


class TestPathToggle:
    def test_remove_then_append(self, runner, snapshot_file):
        result = runner.invoke(
            main, ["path", "toggle", "p1", "n2", "n4", "-s", str(snapshot_file)]
        )

        assert result.exit_code == 0
        assert stored_path(snapshot_file) == ["n1", "n3", "n4"]

    def test_undo_restores(self, runner, snapshot_file):
        runner.invoke(
            main, ["path", "toggle", "p1", "n2", "n4", "--undo", "2", "-s", str(snapshot_file)]
        )
        assert stored_path(snapshot_file) == ["n1", "n2", "n3"]

    def test_extra_undo_is_harmless(self, runner, snapshot_file):
        runner.invoke(
            main, ["path", "toggle", "p1", "n4", "--undo", "5", "-s", str(snapshot_file)]
        )
        assert stored_path(snapshot_file) == ["n1", "n2", "n3"]

    def test_requires_notes(self, runner, snapshot_file):
        result = runner.invoke(main, ["path", "toggle", "p1", "-s", str(snapshot_file)])
        assert result.exit_code != 0

    def test_rejects_unknown_and_foreign_notes(self, runner, snapshot_file):
        result = runner.invoke(
            main, ["path", "toggle", "p1", "ghost", "m1", "-s", str(snapshot_file)]
        )

        assert "Not notes of p1: ghost, m1" in result.output
        assert stored_path(snapshot_file) == ["n1", "n2", "n3"]
