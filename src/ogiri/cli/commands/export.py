"""
Export Command - Write an interactive HTML results page.
"""

import sys
from pathlib import Path

import click

from ... import config
from ...render.html import write_html
from ..utils import configure_logging, echo_error, echo_info, echo_success, load_mapping


@click.command()
@click.argument("csv_file", type=click.Path(dir_okay=False))
@click.option("-o", "--output", default="results.html", show_default=True, help="Output HTML file")
@click.option("--open", "open_browser", is_flag=True, help="Open the page in the default browser")
@click.option("--encoding", default=config.DEFAULT_ENCODING, show_default=True, help="Encoding of the CSV file")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def export(csv_file: str, output: str, open_browser: bool, encoding: str, verbose: bool):
    """
    Generate a standalone HTML page with one link per topic.
    """
    configure_logging(verbose)

    result = load_mapping(csv_file, encoding)
    if result.is_err():
        echo_error(result.unwrap_err().message)
        sys.exit(1)
    mapping = result.unwrap()

    output_path = Path(output)
    write_html(mapping, str(output_path), open_browser=open_browser)

    echo_success(f"Generated: {output_path} ({len(mapping)} topics)")
    echo_info(f"Open: {output_path.absolute().as_uri()}")
