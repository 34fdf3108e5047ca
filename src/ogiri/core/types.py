"""
Core type definitions for ogiri.

Answers and topics are frozen pydantic models so that a parsed result can be
handed to any number of views without being modified along the way.
"""

import math
from types import MappingProxyType
from typing import Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Answer(BaseModel):
    """
    A single submitted answer (kaitou) and its vote total.

    `vote_count` is NaN when the source field did not start with an integer.
    """
    text: str
    respondent: str
    vote_count: int | float
    breakdown: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def has_votes(self) -> bool:
        """True when the vote count is a real number."""
        return not (isinstance(self.vote_count, float) and math.isnan(self.vote_count))

    @property
    def votes_label(self) -> str:
        if not self.has_votes:
            return "NaN"
        return str(self.vote_count)


class Topic(BaseModel):
    """
    A contest prompt (odai) with its answers, highest vote count first.
    """
    title: str
    submitter: str
    answers: Tuple[Answer, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @property
    def answer_count(self) -> int:
        return len(self.answers)


# Topic identifier -> Topic, in first-occurrence order
TopicMapping = Mapping[str, Topic]


def freeze_mapping(topics: dict) -> TopicMapping:
    """Wrap an ordered dict of topics in a read-only view."""
    return MappingProxyType(dict(topics))
