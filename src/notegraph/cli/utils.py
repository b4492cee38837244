"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands:
formatted printing, snapshot loading and saving, and the view options every
inspection command accepts.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import click
import yaml
from pydantic import ValidationError
from rich.logging import RichHandler

from ..config import CONFIG_DIR, NotegraphConfig, load_config
from ..core.result import Err, map_ok
from ..core.snapshot import build_store, dump_snapshot, parse_snapshot, snapshot_from_store
from ..core.store import GraphStore
from ..core.types import CompletionFilter, ViewMode

SNAPSHOT_FILE = "snapshot.json"


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def resolve_snapshot_path(snapshot_file: str) -> Path:
    """
    Resolve a snapshot argument to a file.

    Directories resolve to .notegraph/snapshot.json, then snapshot.json.
    """
    path = Path(snapshot_file)
    if path.is_dir():
        for candidate in (path / CONFIG_DIR / SNAPSHOT_FILE, path / SNAPSHOT_FILE):
            if candidate.exists():
                return candidate
        return path / CONFIG_DIR / SNAPSHOT_FILE
    return path


def load_store(snapshot_file: str) -> Optional[GraphStore]:
    """
    Load a GraphStore from a snapshot file or directory.

    Args:
        snapshot_file (str): Path to a snapshot JSON file, or a directory
            containing .notegraph/snapshot.json.

    Returns:
        Optional[GraphStore]: The hydrated store, or None if loading failed.
    """
    path = resolve_snapshot_path(snapshot_file)
    if not path.exists():
        echo_error(f"Snapshot not found: {snapshot_file}")
        click.echo("Run 'notegraph init' to create an empty one.")
        return None

    result = map_ok(parse_snapshot(path.read_text(encoding="utf-8")), build_store)
    if isinstance(result, Err):
        echo_error(f"Failed to load snapshot: {result.error}")
        return None

    return result.unwrap()


def load_cli_config() -> Optional[NotegraphConfig]:
    """
    Load the layout/render config, reporting a malformed file instead of raising.

    Returns:
        Optional[NotegraphConfig]: The config, or None if the file is invalid.
    """
    try:
        return load_config()
    except yaml.YAMLError as e:
        echo_error(f"Failed to read config: {e}")
    except ValidationError as e:
        echo_error(f"Invalid config: {e.error_count()} validation error(s)\n{e}")
    return None


def save_store(store: GraphStore, snapshot_file: str) -> Path:
    path = resolve_snapshot_path(snapshot_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_snapshot(snapshot_from_store(store)), encoding="utf-8")
    return path


def resolve_project(store: GraphStore, project_id: Optional[str]) -> Optional[str]:
    """
    Pick the active project: the requested one, or the first project.

    Reports and returns None when the requested project does not exist.
    """
    if project_id is None:
        projects = store.projects
        return projects[0].id if projects else None

    if store.get_project(project_id) is None:
        echo_error(f"Project not found: {project_id}")
        known = ", ".join(p.id for p in store.projects) or "none"
        echo_info(f"Known projects: {known}")
        return None
    return project_id


def view_options(func: Callable) -> Callable:
    """Attach the --project / --mode / --filter options shared by view commands."""
    func = click.option(
        "-f", "--filter", "completion",
        type=click.Choice([f.value for f in CompletionFilter]),
        default=CompletionFilter.ALL.value,
        show_default=True,
        help="Completion filter",
    )(func)
    func = click.option(
        "-m", "--mode",
        type=click.Choice([m.value for m in ViewMode]),
        default=ViewMode.SINGLE.value,
        show_default=True,
        help="Single project or all projects merged",
    )(func)
    func = click.option(
        "-p", "--project", "project_id", default=None,
        help="Active project id (default: first project)",
    )(func)
    return func
