"""Shared fixtures for building contest CSV exports."""

from pathlib import Path
from typing import Sequence

import pytest

HEADER = "No,お題番号,出題者,お題,回答No,回答者,回答,得票数,,投票者1,票1,投票者2,票2"


def make_row(
    topic_id: str,
    votes: str,
    answer: str = "answer",
    respondent: str = "respondent",
    title: str = "title",
    submitter: str = "submitter",
    voters: Sequence[str] = (),
) -> str:
    """One data row; voter name/vote pairs start at column 9."""
    columns = ["0", topic_id, submitter, title, "0", respondent, answer, votes, ""]
    return ",".join(columns + list(voters))


def make_csv(*rows: str) -> str:
    return "\n".join([HEADER, *rows]) + "\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a cp932-encoded CSV under tmp_path and return its path."""

    def _write(*rows: str, name: str = "results.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(make_csv(*rows).encode("cp932"))
        return path

    return _write
