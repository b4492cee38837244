"""Unit tests for the 'render' command."""

from unittest.mock import patch

from notegraph.cli.main import main


class TestRenderCommand:
    def test_writes_svg(self, runner, snapshot_file, tmp_path):
        out = tmp_path / "network.svg"
        result = runner.invoke(main, ["render", str(snapshot_file), "-o", str(out)])

        assert result.exit_code == 0
        assert "Generated" in result.output
        svg = out.read_text()
        assert "<svg" in svg
        assert 'data-id="n1"' in svg
        assert 'data-id="m1"' not in svg

    def test_merged_includes_cross_project_edge(self, runner, snapshot_file, tmp_path):
        out = tmp_path / "merged.svg"
        runner.invoke(main, ["render", str(snapshot_file), "-m", "merged", "-o", str(out)])

        assert 'data-kind="cross_project"' in out.read_text()

    def test_checkpoint_rendering(self, runner, snapshot_file, tmp_path):
        out = tmp_path / "path.svg"
        result = runner.invoke(
            main, ["render", str(snapshot_file), "--checkpoint", "-o", str(out)]
        )

        assert result.exit_code == 0
        svg = out.read_text()
        assert "data-kind=" not in svg
        assert 'data-step="2"' in svg

    def test_scale(self, runner, snapshot_file, tmp_path):
        out = tmp_path / "big.svg"
        runner.invoke(main, ["render", str(snapshot_file), "--scale", "3", "-o", str(out)])

        assert 'width="900.00"' in out.read_text()

    def test_unsupported_format(self, runner, snapshot_file, tmp_path):
        result = runner.invoke(
            main, ["render", str(snapshot_file), "-o", str(tmp_path / "network.png")]
        )
        assert "Unsupported format" in result.output

    @patch("notegraph.render.svg.webbrowser.open")
    def test_open(self, mock_open, runner, snapshot_file, tmp_path):
        out = tmp_path / "network.svg"
        runner.invoke(main, ["render", str(snapshot_file), "--open", "-o", str(out)])

        assert out.exists()
        mock_open.assert_called_once()

    def test_invalid_config_writes_nothing(self, runner, snapshot_file, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("render: {scale: 0}\n")
        monkeypatch.setenv("NOTEGRAPH_CONFIG", str(config))
        out = tmp_path / "network.svg"

        result = runner.invoke(main, ["render", str(snapshot_file), "-o", str(out)])

        assert "Invalid config" in result.output
        assert not out.exists()
