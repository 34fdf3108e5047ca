"""
Show Command - Print a topic's ranked answers in the terminal.
"""

import sys

import click

from ... import config
from ..utils import configure_logging, console_session, echo_warning


@click.command()
@click.argument("csv_file", type=click.Path(dir_okay=False))
@click.option("-t", "--topic", "topic_key", help="Topic number to show (default: first topic)")
@click.option("-i", "--interactive", is_flag=True, help="Prompt for topic numbers until empty input")
@click.option("--encoding", default=config.DEFAULT_ENCODING, show_default=True, help="Encoding of the CSV file")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def show(csv_file: str, topic_key: str, interactive: bool, encoding: str, verbose: bool):
    """
    Show ranked answers for one topic of a contest CSV.
    """
    configure_logging(verbose)

    controller, view = console_session(encoding)
    result = controller.select(csv_file)
    if result.is_err():
        # The view has already printed the user-facing message
        sys.exit(1)

    presenter = controller.presenter
    entries = {entry.key: entry for entry in presenter.navigation}

    if topic_key is not None:
        if topic_key not in entries:
            echo_warning(f"No topic numbered {topic_key!r}; showing {presenter.current_key}")
        else:
            entries[topic_key].activate()

    view.render()

    if not interactive:
        return

    while True:
        choice = click.prompt("お題番号", default="", show_default=False).strip()
        if not choice:
            break
        entry = entries.get(choice)
        if entry is None:
            echo_warning(f"No topic numbered {choice!r}")
            continue
        entry.activate()
        view.render()
