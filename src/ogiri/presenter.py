"""
Result Presenter.

Owns the most recently parsed TopicMapping and the currently selected topic
key, and drives a ResultView: one navigation entry per topic, plus the
ranked answers of the selected topic.

Each presenter instance keeps its own state, so several views (or tests)
can run side by side.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Optional, Protocol, Sequence

from . import config
from .core.types import TopicMapping
from .render.view_model import TopicView, build_topic_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationEntry:
    """A clickable link to one topic."""

    key: str
    label: str
    _on_activate: Callable[[str], None]

    def activate(self) -> None:
        """Select this entry's topic. The loaded mapping is left as is."""
        self._on_activate(self.key)


class ResultView(Protocol):
    """
    Display surface driven by the presenter.

    Implementations only draw; all decisions are made by the presenter.
    """

    def clear_error(self) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...

    def hide_results(self) -> None:
        ...

    def show_navigation(self, entries: Sequence[NavigationEntry]) -> None:
        ...

    def show_topic(self, view: TopicView) -> None:
        ...


_EMPTY: TopicMapping = MappingProxyType({})


class ResultPresenter:
    """
    Holds the current mapping and renders the selected topic.
    """

    def __init__(self, view: ResultView):
        self.view = view
        self._mapping: TopicMapping = _EMPTY
        self._current_key: Optional[str] = None
        self._entries: List[NavigationEntry] = []

    @property
    def current_mapping(self) -> TopicMapping:
        return self._mapping

    @property
    def current_key(self) -> Optional[str]:
        return self._current_key

    @property
    def navigation(self) -> List[NavigationEntry]:
        return list(self._entries)

    def initialize(self, mapping: TopicMapping) -> bool:
        """
        Replace the current mapping and show its first topic.

        Returns:
            bool: False when the mapping has no topics. The view then gets
            the "no topics found" message and nothing is rendered.
        """
        self._mapping = mapping
        self._current_key = None
        self._entries = [
            NavigationEntry(key=key, label=key, _on_activate=self.select_topic)
            for key in mapping
        ]

        if not self._entries:
            logger.debug("Mapping has no topics; nothing to render")
            self.view.hide_results()
            self.view.show_error(config.MSG_EMPTY_RESULT)
            return False

        self.view.show_navigation(self.navigation)
        self.select_topic(self._entries[0].key)
        return True

    def select_topic(self, key: str) -> None:
        """Render the topic stored under `key`. Unknown keys are ignored."""
        topic = self._mapping.get(key)
        if topic is None:
            logger.debug(f"Ignoring selection of unknown topic {key!r}")
            return

        self._current_key = key
        self.view.show_topic(build_topic_view(key, topic))
