"""
Init Command - Project bootstrap.

Writes .notegraph/config.yaml with the default layout geometry and an empty
snapshot next to it.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_DIR, CONFIG_FILE, NotegraphConfig
from ...core.snapshot import Snapshot, dump_snapshot
from ..utils import SNAPSHOT_FILE

console = Console()


def create_gitignore(notegraph_dir: Path):
    """Ensure the .notegraph/ directory is ignored by git."""
    gitignore = notegraph_dir.parent / ".gitignore"
    entry = "\n# notegraph\n.notegraph/\n"

    if not gitignore.exists():
        with open(gitignore, "w") as f:
            f.write(entry)
    else:
        content = gitignore.read_text()
        if ".notegraph" not in content:
            with open(gitignore, "a") as f:
                f.write(entry)


def _init_project(root_dir: Path):
    notegraph_dir = root_dir / CONFIG_DIR
    config_file = notegraph_dir / CONFIG_FILE
    snapshot_file = notegraph_dir / SNAPSHOT_FILE

    notegraph_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(NotegraphConfig().to_yaml_dict(), f, sort_keys=False, default_flow_style=False)

    if not snapshot_file.exists():
        snapshot_file.write_text(dump_snapshot(Snapshot()), encoding="utf-8")

    create_gitignore(notegraph_dir)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    console.print(f"   Snapshot at: [dim]{snapshot_file}[/dim]")


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """
    Initialize notegraph in the current directory.
    """
    console.print(Panel.fit("🧭 [bold blue]notegraph Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_DIR / CONFIG_FILE

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    _init_project(root_dir)
