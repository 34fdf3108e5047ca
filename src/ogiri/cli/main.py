"""
ogiri CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import click

from .commands import export, show, topics, watch


@click.group()
@click.version_option(package_name="ogiri")
def main():
    """ogiri: ranked results viewer for odai contest CSV exports.

    \b
    Quick Start:
      ogiri show results.csv
      ogiri show results.csv --interactive
      ogiri export results.csv --output results.html --open
    """
    pass


# Register commands
main.add_command(show.show)
main.add_command(export.export)
main.add_command(topics.topics)
main.add_command(watch.watch)

if __name__ == "__main__":
    main()
