"""
Topic View Model.

Pure transform from a Topic to the rows a view displays. Views never look at
Topic directly, so every renderer ranks and labels answers the same way.
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.types import Topic


@dataclass(frozen=True)
class RankedAnswer:
    rank: int
    votes: str
    text: str
    respondent: str
    breakdown: str


@dataclass(frozen=True)
class TopicView:
    """Everything needed to display one topic."""

    key: str
    title: str
    submitter: str
    answers: Tuple[RankedAnswer, ...]


def build_topic_view(key: str, topic: Topic) -> TopicView:
    """Annotate a topic's answers with their 1-based rank."""
    rows = tuple(
        RankedAnswer(
            rank=index + 1,
            votes=answer.votes_label,
            text=answer.text,
            respondent=answer.respondent,
            breakdown=answer.breakdown,
        )
        for index, answer in enumerate(topic.answers)
    )
    return TopicView(key=key, title=topic.title, submitter=topic.submitter, answers=rows)
