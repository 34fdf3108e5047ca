"""
Watch Command.

Follows a contest CSV and repaints the first topic every time it changes.
"""

import logging
from pathlib import Path

import click
from rich.console import Console

from ... import config
from ..utils import console_session

console = Console()


@click.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default=config.DEFAULT_ENCODING, show_default=True, help="Encoding of the CSV file")
def watch(csv_file: str, encoding: str):
    """
    Re-render results whenever CSV_FILE changes.

    Useful while votes are still being tallied into the export.
    """
    # Configure logging to ensure we see the watcher events
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="[%X]"
    )

    # Lazy import: only import the watcher (and watchdog) when this command actually RUNS.
    from ..watcher import CsvWatcher

    csv_path = Path(csv_file).resolve()

    console.print("[bold green]ogiri watch[/bold green]")
    console.print(f"Watching: [cyan]{csv_path}[/cyan]")

    controller, view = console_session(encoding, console)
    watcher = CsvWatcher(csv_path, controller, on_loaded=view.render)
    watcher.start()
