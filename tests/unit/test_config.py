"""Unit tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from notegraph.config import (
    CONFIG_ENV_VAR,
    LayoutConfig,
    NotegraphConfig,
    default_config_path,
    load_config,
)


class TestDefaults:
    def test_default_geometry(self):
        config = NotegraphConfig()

        assert config.layout.width == 300
        assert config.layout.height == 220
        assert config.layout.center == (150, 110)
        assert config.render.label_max_chars == 8

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            LayoutConfig(width=0)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == NotegraphConfig()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"layout": {"single_radius": 50}}))

        config = load_config(path)

        assert config.layout.single_radius == 50
        assert config.layout.width == 300

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == NotegraphConfig()

    def test_round_trip_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        expected = NotegraphConfig(layout=LayoutConfig(cluster_radius=80))
        path.write_text(yaml.dump(expected.to_yaml_dict()))

        assert load_config(path) == expected

    def test_invalid_file_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"render": {"label_max_chars": 0}}))

        with pytest.raises(ValidationError):
            load_config(path)


class TestConfigPath:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"

    def test_default_location(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert str(default_config_path()).endswith(".notegraph/config.yaml")
