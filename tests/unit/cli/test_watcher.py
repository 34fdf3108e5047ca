"""
Unit tests for the CSV watcher.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Skip this entire module if watchdog is not installed.
pytest.importorskip("watchdog")

from watchdog.events import DirModifiedEvent, FileModifiedEvent, FileMovedEvent

from conftest import make_csv, make_row
from ogiri.cli.watcher import CsvChangeHandler, CsvWatcher
from ogiri.core.errors import LoadError, LoadErrorKind
from ogiri.core.result import Err, Ok
from ogiri.loader import FileSelectionController
from ogiri.presenter import ResultPresenter


@pytest.fixture
def csv_path(tmp_path):
    path = (tmp_path / "results.csv").resolve()
    path.write_text("header\n")
    return path


@pytest.fixture
def controller():
    ctrl = MagicMock()
    ctrl.select.return_value = Ok({"1": MagicMock()})
    return ctrl


class TestCsvChangeHandler:
    def test_modification_reloads(self, csv_path, controller):
        on_loaded = MagicMock()
        handler = CsvChangeHandler(csv_path, controller, on_loaded, cooldown=0)

        handler.on_modified(FileModifiedEvent(str(csv_path)))

        controller.select.assert_called_once_with(csv_path)
        on_loaded.assert_called_once()

    def test_other_files_are_ignored(self, csv_path, controller):
        handler = CsvChangeHandler(csv_path, controller, cooldown=0)

        handler.on_modified(FileModifiedEvent(str(csv_path.parent / "other.csv")))

        controller.select.assert_not_called()

    def test_directory_events_are_ignored(self, csv_path, controller):
        handler = CsvChangeHandler(csv_path, controller, cooldown=0)
        handler.on_modified(DirModifiedEvent(str(csv_path.parent)))
        controller.select.assert_not_called()

    def test_move_into_place_reloads(self, csv_path, controller):
        handler = CsvChangeHandler(csv_path, controller, cooldown=0)
        handler.on_moved(FileMovedEvent(str(csv_path.parent / "tmp123"), str(csv_path)))
        controller.select.assert_called_once_with(csv_path)

    def test_rapid_events_reload_once_after_cooldown(self, csv_path, controller):
        handler = CsvChangeHandler(csv_path, controller, cooldown=0.05)

        handler.on_modified(FileModifiedEvent(str(csv_path)))
        handler.on_modified(FileModifiedEvent(str(csv_path)))
        controller.select.assert_not_called()

        handler.pending.join(timeout=5)

        assert controller.select.call_count == 1
        assert handler.pending is None

    def test_last_write_is_displayed(self, csv_path):
        controller = FileSelectionController(ResultPresenter(MagicMock()))
        handler = CsvChangeHandler(csv_path, controller, cooldown=0.05)

        csv_path.write_bytes(make_csv(make_row("1", "1")).encode("cp932"))
        handler.on_modified(FileModifiedEvent(str(csv_path)))
        csv_path.write_bytes(make_csv(make_row("1", "1"), make_row("2", "3")).encode("cp932"))
        handler.on_modified(FileModifiedEvent(str(csv_path)))

        handler.pending.join(timeout=5)

        assert list(controller.presenter.current_mapping) == ["1", "2"]

    def test_reload_blocked_by_inflight_load_is_retried(self, csv_path, controller):
        controller.select.side_effect = [
            Err(LoadError.of(LoadErrorKind.BUSY)),
            Ok({"1": MagicMock()}),
        ]
        on_loaded = MagicMock()
        handler = CsvChangeHandler(csv_path, controller, on_loaded, cooldown=0.01)

        assert handler.reload() is False
        assert handler.pending is not None
        handler.pending.join(timeout=5)

        assert controller.select.call_count == 2
        on_loaded.assert_called_once()

    def test_cancel_drops_pending_reload(self, csv_path, controller):
        handler = CsvChangeHandler(csv_path, controller, cooldown=60)
        handler.on_modified(FileModifiedEvent(str(csv_path)))
        timer = handler.pending

        handler.cancel()
        timer.join(timeout=5)

        assert handler.pending is None
        controller.select.assert_not_called()

    def test_failed_reload_does_not_repaint(self, csv_path, controller):
        controller.select.return_value = Err(LoadError.of(LoadErrorKind.PARSE_FAILURE))
        on_loaded = MagicMock()
        handler = CsvChangeHandler(csv_path, controller, on_loaded, cooldown=0)

        assert handler.reload() is False
        on_loaded.assert_not_called()


class TestCsvWatcher:
    def test_start_loads_then_observes(self, csv_path, controller):
        on_loaded = MagicMock()
        watcher = CsvWatcher(csv_path, controller, on_loaded)

        with patch("ogiri.cli.watcher.Observer") as mock_observer_cls, \
                patch("ogiri.cli.watcher.time.sleep", side_effect=KeyboardInterrupt):
            watcher.start()

        controller.select.assert_called_once_with(csv_path)
        on_loaded.assert_called_once()
        observer = mock_observer_cls.return_value
        observer.schedule.assert_called_once()
        assert observer.schedule.call_args.args[1] == str(csv_path.parent)
        observer.start.assert_called_once()
        observer.stop.assert_called_once()
        observer.join.assert_called_once()
