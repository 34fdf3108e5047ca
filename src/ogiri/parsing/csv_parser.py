"""
Contest CSV Parser.

Turns the decoded text of a contest export into a TopicMapping. The export
has a header row followed by one row per answer:

    [1] topic id   [2] submitter   [3] title
    [5] respondent [6] answer      [7] vote count
    [9], [11], ... voter name ("<id> <display name>")
    [10], [12], ... that voter's vote value

Rows are grouped by topic id in first-occurrence order, and each topic's
answers are ranked by vote count once every row has been read.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

from .. import config
from ..core.errors import CsvParseError
from ..core.types import Answer, Topic, TopicMapping, freeze_mapping

logger = logging.getLogger(__name__)

# Leading base-10 integer: optional whitespace (U+3000 and BOM included),
# optional sign, then ASCII digits
_LEADING_INT = re.compile(r"[\s\ufeff]*([+-]?[0-9]+)")


def parse_vote_count(raw: str) -> int | float:
    """
    Read the leading integer of a vote field.

    Trailing garbage is ignored ("12票" -> 12); a field that does not start
    with a number yields NaN instead of raising.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return math.nan
    return int(match.group(1))


def display_name(raw_name: str) -> str:
    """Drop the "<id> " prefix from a voter name field."""
    return raw_name[raw_name.find(" ") + 1:]


def _cell(columns: Sequence[str], index: int) -> str:
    """Trimmed cell value, or "" past the end of the row."""
    if index < len(columns):
        return columns[index].strip()
    return ""


def extract_breakdown(columns: Sequence[str], start: int = config.COL_FIRST_VOTER) -> str:
    """
    Build the "name(votes) / name(votes)" summary for one row.

    Walks (name, votes) pairs from `start` and stops at the first pair where
    either side is empty, or at the end of the row.
    """
    parts: List[str] = []
    for j in range(start, len(columns), 2):
        voter = _cell(columns, j)
        votes = _cell(columns, j + 1)
        if not (voter and votes):
            break
        parts.append(f"{display_name(voter)}({votes})")
    return config.BREAKDOWN_SEPARATOR.join(parts)


def _rank_key(answer: Answer):
    # NaN totals sink below every real total
    if not answer.has_votes:
        return (1, 0)
    return (0, -answer.vote_count)


def rank_answers(answers: Sequence[Answer]) -> List[Answer]:
    """Sort answers by vote count, highest first. Ties keep input order."""
    return sorted(answers, key=_rank_key)


@dataclass
class _TopicBuilder:
    title: str
    submitter: str
    answers: List[Answer] = field(default_factory=list)

    def build(self) -> Topic:
        return Topic(
            title=self.title,
            submitter=self.submitter,
            answers=tuple(rank_answers(self.answers)),
        )


class CsvParser:
    """
    Parser for contest result exports.

    Stateless: every call to `parse` builds a fresh mapping.
    """

    def can_parse(self, file_path: Path) -> bool:
        return file_path.name.endswith(config.CSV_SUFFIX)

    def parse(self, raw_text: str) -> TopicMapping:
        """
        Parse decoded CSV text into topics keyed by topic id.

        Raises:
            CsvParseError: If `raw_text` is not a string.
        """
        if not isinstance(raw_text, str):
            raise CsvParseError(f"Expected decoded text, got {type(raw_text).__name__}")

        builders: Dict[str, _TopicBuilder] = {}
        row_count = 0

        # First line is the header
        for line in raw_text.split("\n")[1:]:
            line = line.strip()
            if not line:
                continue

            columns = line.split(config.COLUMN_SEPARATOR)
            if len(columns) < config.MIN_COLUMNS:
                continue

            topic_id = columns[config.COL_TOPIC_ID]
            if not topic_id:
                continue

            answer = Answer(
                text=columns[config.COL_ANSWER],
                respondent=columns[config.COL_RESPONDENT],
                vote_count=parse_vote_count(columns[config.COL_VOTES]),
                breakdown=extract_breakdown(columns),
            )

            builder = builders.get(topic_id)
            if builder is None:
                builder = _TopicBuilder(
                    title=columns[config.COL_TITLE],
                    submitter=columns[config.COL_SUBMITTER],
                )
                builders[topic_id] = builder
            builder.answers.append(answer)
            row_count += 1

        topics = {key: b.build() for key, b in builders.items()}
        logger.info(f"Parsed {row_count} answers across {len(topics)} topics")
        return freeze_mapping(topics)


def parse_csv(raw_text: str) -> TopicMapping:
    """Convenience wrapper around `CsvParser().parse`."""
    return CsvParser().parse(raw_text)
