"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing plus the common "load a CSV into a presenter" step used
by every command.
"""

import logging
from typing import Optional, Tuple

import click
from rich.console import Console

from ..core.errors import LoadError
from ..core.result import Result
from ..core.types import TopicMapping
from ..loader import FileSelectionController
from ..presenter import ResultPresenter
from ..render.console import ConsoleView


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
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    """Enable debug logging on stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


class _SilentView:
    """View for commands that only need the parsed mapping, not its display."""

    def clear_error(self) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def hide_results(self) -> None:
        pass

    def show_navigation(self, entries) -> None:
        pass

    def show_topic(self, view) -> None:
        pass


def load_mapping(csv_file: str, encoding: str) -> Result[TopicMapping, LoadError]:
    """
    Load and parse a CSV without displaying it.

    Args:
        csv_file (str): Path to the contest CSV.
        encoding (str): Codec used to decode the file.

    Returns:
        Result: Ok(mapping), or Err(LoadError) carrying the user-facing message.
    """
    controller = FileSelectionController(ResultPresenter(_SilentView()), encoding=encoding)
    return controller.select(csv_file)


def console_session(encoding: str, console: Optional[Console] = None) -> Tuple[FileSelectionController, ConsoleView]:
    """Build a controller wired to a rich console view."""
    view = ConsoleView(console)
    controller = FileSelectionController(ResultPresenter(view), encoding=encoding)
    return controller, view
