"""
Topics Command - List the topics found in a contest CSV.

Outputs a table, or a JSON envelope for scripts and editor integrations.
"""

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from ... import config
from ..utils import configure_logging, echo_error, load_mapping


@click.command()
@click.argument("csv_file", type=click.Path(dir_okay=False))
@click.option("--json", "json_mode", is_flag=True, help="Output topics as JSON to stdout")
@click.option("--encoding", default=config.DEFAULT_ENCODING, show_default=True, help="Encoding of the CSV file")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def topics(csv_file: str, json_mode: bool, encoding: str, verbose: bool):
    """
    List topic numbers in file order with their titles.
    """
    configure_logging(verbose)

    result = load_mapping(csv_file, encoding)
    if result.is_err():
        error = result.unwrap_err()
        if json_mode:
            click.echo(json.dumps({
                "meta": {"status": "error"},
                "error": {"kind": str(error.kind), "message": error.message},
            }, ensure_ascii=False))
        else:
            echo_error(error.message)
        sys.exit(1)
    mapping = result.unwrap()

    rows = [
        {
            "key": key,
            "title": topic.title,
            "submitter": topic.submitter,
            "answers": topic.answer_count,
        }
        for key, topic in mapping.items()
    ]

    if json_mode:
        click.echo(json.dumps({"meta": {"status": "success"}, "data": rows}, ensure_ascii=False))
        return

    table = Table(title=f"{len(rows)} topics")
    table.add_column("番号", style="cyan")
    table.add_column("お題")
    table.add_column("出題者")
    table.add_column("回答数", justify="right")
    for row in rows:
        table.add_row(row["key"], row["title"], row["submitter"], str(row["answers"]))
    Console().print(table)
