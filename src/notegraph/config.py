"""
Global Configuration and Layout Defaults.

This module centralizes the geometry the layout engine and the scene builder
work with. All coordinates live on a fixed logical canvas; renderers scale it
to whatever pixel size they draw at.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# --- Canvas ---
CANVAS_WIDTH = 300.0
CANVAS_HEIGHT = 220.0

# --- Radii ---
# Single project: every note sits on one circle around the canvas center
SINGLE_PROJECT_RADIUS = 70.0

# Merged view: cluster centers sit on this circle...
CLUSTER_RADIUS = 60.0

# ...and each project's notes sit on a smaller circle around its center
CLUSTER_NOTE_RADIUS = 25.0

# --- Labels ---
LABEL_MAX_CHARS = 8

# --- Files ---
CONFIG_DIR = ".notegraph"
CONFIG_FILE = "config.yaml"
CONFIG_ENV_VAR = "NOTEGRAPH_CONFIG"


class LayoutConfig(BaseModel):
    """Geometry for the clustered circular layout."""
    width: float = Field(default=CANVAS_WIDTH, gt=0)
    height: float = Field(default=CANVAS_HEIGHT, gt=0)
    single_radius: float = Field(default=SINGLE_PROJECT_RADIUS, ge=0)
    cluster_radius: float = Field(default=CLUSTER_RADIUS, ge=0)
    note_radius: float = Field(default=CLUSTER_NOTE_RADIUS, ge=0)

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


class RenderConfig(BaseModel):
    label_max_chars: int = Field(default=LABEL_MAX_CHARS, ge=1)
    scale: float = Field(default=2.0, gt=0)


class NotegraphConfig(BaseModel):
    """
    Top-level configuration, mirrors .notegraph/config.yaml.
    """
    version: str = "1.0"
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    def to_yaml_dict(self) -> dict:
        return self.model_dump()


def default_config_path() -> Path:
    """Resolve the config file location, honoring NOTEGRAPH_CONFIG."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(CONFIG_DIR) / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> NotegraphConfig:
    """
    Load configuration from YAML.

    A missing file yields the defaults. Unknown keys are ignored, invalid
    values raise pydantic's ValidationError.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        logger.debug("No config at %s, using defaults", config_path)
        return NotegraphConfig()

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded config from %s", config_path)
    return NotegraphConfig.model_validate(data)
