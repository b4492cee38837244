"""
notegraph CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import connect, delete, layout, path, render, show
from .commands import init
from .utils import configure_logging


@click.group()
@click.version_option(package_name="notegraph")
@click.option("-v", "--verbose", is_flag=True, help="Log graph mutations and transitions")
def main(verbose: bool):
    """notegraph: note relationship graph and checkpoint paths.

    Inspects and edits the connections and paths stored in an organizer
    snapshot, and renders the note network.

    \b
    Quick Start:
      notegraph init
      notegraph show --mode merged --filter unsolved
      notegraph render -p my-project -o network.svg
    """
    configure_logging(verbose)


# Register commands
main.add_command(init)
main.add_command(show.show)
main.add_command(layout.layout)
main.add_command(render.render)
main.add_command(connect.connect)
main.add_command(path.path)
main.add_command(delete.delete)
main.add_command(delete.delete_project)

if __name__ == "__main__":
    main()
