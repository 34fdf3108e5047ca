"""Unit tests for ResultPresenter and navigation entries."""

from unittest.mock import MagicMock

import pytest

from conftest import make_csv, make_row
from ogiri import config
from ogiri.parsing.csv_parser import parse_csv
from ogiri.presenter import ResultPresenter


@pytest.fixture
def view():
    return MagicMock()


@pytest.fixture
def mapping():
    return parse_csv(make_csv(
        make_row("5", "1", title="five"),
        make_row("2", "1", title="two"),
        make_row("9", "1", title="nine"),
    ))


class TestInitialize:
    def test_builds_navigation_in_mapping_order(self, view, mapping):
        presenter = ResultPresenter(view)
        assert presenter.initialize(mapping) is True

        entries = view.show_navigation.call_args.args[0]
        assert [e.key for e in entries] == ["5", "2", "9"]
        assert [e.label for e in entries] == ["5", "2", "9"]

    def test_renders_first_topic(self, view, mapping):
        presenter = ResultPresenter(view)
        presenter.initialize(mapping)

        view.show_topic.assert_called_once()
        rendered = view.show_topic.call_args.args[0]
        assert rendered.key == "5"
        assert rendered.title == "five"
        assert presenter.current_key == "5"

    def test_empty_mapping_reports_no_topics(self, view):
        presenter = ResultPresenter(view)
        assert presenter.initialize({}) is False

        view.show_error.assert_called_once_with(config.MSG_EMPTY_RESULT)
        view.hide_results.assert_called_once()
        view.show_topic.assert_not_called()
        view.show_navigation.assert_not_called()
        assert presenter.current_key is None

    def test_new_mapping_replaces_old(self, view, mapping):
        presenter = ResultPresenter(view)
        presenter.initialize(mapping)
        replacement = parse_csv(make_csv(make_row("1", "1", title="one")))
        presenter.initialize(replacement)

        assert list(presenter.current_mapping) == ["1"]
        assert presenter.current_key == "1"
        assert [e.key for e in presenter.navigation] == ["1"]

        view.show_topic.reset_mock()
        presenter.select_topic("5")
        view.show_topic.assert_not_called()


class TestSelectTopic:
    def test_unknown_key_is_noop(self, view, mapping):
        presenter = ResultPresenter(view)
        presenter.initialize(mapping)
        view.show_topic.reset_mock()

        presenter.select_topic("404")

        view.show_topic.assert_not_called()
        assert presenter.current_key == "5"

    def test_select_before_initialize_is_noop(self, view):
        presenter = ResultPresenter(view)
        presenter.select_topic("1")
        view.show_topic.assert_not_called()

    def test_entry_activation_selects_topic(self, view, mapping):
        presenter = ResultPresenter(view)
        presenter.initialize(mapping)

        presenter.navigation[2].activate()

        assert view.show_topic.call_args.args[0].key == "9"
        assert presenter.current_key == "9"
        # Activation never reloads the mapping
        assert view.show_navigation.call_count == 1

    def test_instances_are_independent(self, mapping):
        first = ResultPresenter(MagicMock())
        second = ResultPresenter(MagicMock())
        first.initialize(mapping)

        assert len(second.current_mapping) == 0
        assert second.current_key is None
