"""
Render Command - Export the note network as SVG.
"""

from pathlib import Path
from typing import Optional

import click

from ...core.types import CompletionFilter, ViewMode
from ...interaction.machine import CheckpointMode, LinkMode
from ...layout.circular import compute_layout
from ...render.svg import open_svg, write_svg
from ...view.composer import compose_view
from ...view.scene import build_scene
from ..utils import (
    echo_error,
    echo_info,
    echo_success,
    load_cli_config,
    load_store,
    resolve_project,
    view_options,
)


@click.command()
@click.argument("snapshot", default=".")
@view_options
@click.option("-o", "--output", default="network.svg", show_default=True, help="Output .svg file")
@click.option("--checkpoint", is_flag=True, help="Render as in path editing mode")
@click.option("--scale", type=float, default=None, help="Size multiplier (default from config)")
@click.option("--open", "open_browser", is_flag=True, help="Open the result in a browser")
def render(
    snapshot: str,
    project_id: str,
    mode: str,
    completion: str,
    output: str,
    checkpoint: bool,
    scale: Optional[float],
    open_browser: bool,
):
    """
    Render a view of the note network to an SVG file.
    """
    output_path = Path(output)
    if output_path.suffix != ".svg":
        echo_error(f"Unsupported format: {output_path.suffix}")
        click.echo("Supported: .svg")
        return

    store = load_store(snapshot)
    if store is None:
        return

    active = resolve_project(store, project_id)
    if project_id is not None and active is None:
        return

    config = load_cli_config()
    if config is None:
        return

    view = compose_view(store, ViewMode(mode), CompletionFilter(completion), active)
    positions = compute_layout(view.notes, config.layout)
    state = CheckpointMode(project_id=active) if checkpoint else LinkMode(project_id=active)
    scene = build_scene(view, positions, state, config)
    factor = scale if scale is not None else config.render.scale

    if open_browser:
        open_svg(scene, str(output_path), scale=factor)
    else:
        write_svg(scene, output_path, scale=factor)

    echo_success(f"Generated: {output_path}")
    echo_info(f"{len(scene.nodes)} notes, {len(scene.edges)} links, {len(scene.segments)} path steps")
