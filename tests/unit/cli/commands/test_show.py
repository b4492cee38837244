"""Unit tests for the 'show' and 'layout' commands."""

import json

from notegraph.cli.main import main


class TestShowCommand:
    def test_json_single_project(self, runner, snapshot_file):
        result = runner.invoke(main, ["show", str(snapshot_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["project"] == "p1"
        assert [n["id"] for n in data["notes"]] == ["n1", "n2", "n3", "n4", "c1"]
        assert data["notes"][0]["projectId"] == "p1"
        assert data["path"] == ["n1", "n2", "n3"]
        assert [c["id"] for c in data["connections"]] == ["conn-1"]

    def test_json_unsolved_filter(self, runner, snapshot_file):
        result = runner.invoke(main, ["show", str(snapshot_file), "--json", "-f", "unsolved"])

        data = json.loads(result.output)
        assert "n2" not in [n["id"] for n in data["notes"]]
        assert data["connections"] == []
        assert data["path"] == ["n1", "n2", "n3"]

    def test_json_merged_classifies_edges(self, runner, snapshot_file):
        result = runner.invoke(main, ["show", str(snapshot_file), "--json", "-m", "merged"])

        data = json.loads(result.output)
        kinds = {c["id"]: c["kind"] for c in data["connections"]}
        assert kinds == {"conn-1": "intra_project", "conn-2": "cross_project"}

    def test_table_output(self, runner, snapshot_file):
        result = runner.invoke(main, ["show", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Sketch" in result.output
        assert "Connections" in result.output

    def test_unknown_project(self, runner, snapshot_file):
        result = runner.invoke(main, ["show", str(snapshot_file), "-p", "ghost"])
        assert "Project not found: ghost" in result.output

    def test_missing_snapshot(self, runner, tmp_path):
        result = runner.invoke(main, ["show", str(tmp_path / "missing.json")])
        assert "Snapshot not found" in result.output


class TestLayoutCommand:
    def test_json_positions(self, runner, snapshot_file):
        result = runner.invoke(main, ["layout", str(snapshot_file), "--json", "-p", "p2"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"m1": {"x": 220.0, "y": 110.0}}

    def test_table(self, runner, snapshot_file):
        result = runner.invoke(main, ["layout", str(snapshot_file), "-m", "merged"])

        assert result.exit_code == 0
        assert "m1" in result.output

    def test_invalid_config_is_reported(self, runner, snapshot_file, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("layout: {width: -1}\n")
        monkeypatch.setenv("NOTEGRAPH_CONFIG", str(config))

        result = runner.invoke(main, ["layout", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Invalid config" in result.output

    def test_unparseable_config_is_reported(self, runner, snapshot_file, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("layout: [unclosed\n")
        monkeypatch.setenv("NOTEGRAPH_CONFIG", str(config))

        result = runner.invoke(main, ["layout", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Failed to read config" in result.output
