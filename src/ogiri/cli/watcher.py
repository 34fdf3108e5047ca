"""
FileSystem Watcher Module.

Re-loads a contest CSV whenever it changes on disk and repaints the
terminal view, so results can be followed while the export is rewritten.

Key Components:
- CsvChangeHandler: watchdog handler that filters events down to one file.
- CsvWatcher: main controller that owns the observer loop.
"""

import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .. import config
from ..core.errors import LoadErrorKind
from ..loader import FileSelectionController

logger = logging.getLogger(__name__)


class CsvChangeHandler(FileSystemEventHandler):
    """
    Triggers a reload when the watched CSV is created, modified, or moved
    into place.

    Reloads are debounced on the trailing edge: every event restarts the
    cooldown timer, and the file is read once the events stop. A reload that
    hits the controller's in-flight guard is rescheduled, so the last
    version written is always the one displayed.
    """

    def __init__(
        self,
        csv_path: Path,
        controller: FileSelectionController,
        on_loaded: Optional[Callable[[], None]] = None,
        cooldown: float = config.WATCH_COOLDOWN_SEC,
    ):
        """
        Initialize the event handler.

        Args:
            csv_path: Absolute path of the file to follow.
            controller: Controller that loads the file into its presenter.
            on_loaded: Called after every successful reload (e.g. repaint).
            cooldown: Seconds without events before a reload runs.
                0 reloads synchronously on every event.
        """
        self.csv_path = csv_path
        self.controller = controller
        self.on_loaded = on_loaded
        self._cooldown = cooldown
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> Optional[threading.Timer]:
        """The scheduled reload, if one is waiting for the cooldown."""
        return self._timer

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if event.is_directory:
            return
        self._maybe_reload(Path(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        if event.is_directory:
            return
        self._maybe_reload(Path(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle editors that save by renaming a temp file over the target."""
        if event.is_directory:
            return
        self._maybe_reload(Path(event.dest_path))

    def _maybe_reload(self, path: Path) -> None:
        if path.resolve() != self.csv_path:
            return

        logger.info(f"⚡ Change detected: {path.name}")
        self.schedule_reload()

    def schedule_reload(self) -> None:
        """Restart the cooldown; the reload runs when it expires."""
        if self._cooldown <= 0:
            self.reload()
            return
        self._start_timer(self._cooldown)

    def _start_timer(self, delay: float) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(delay, self._run_pending)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop a scheduled reload without running it."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run_pending(self) -> None:
        with self._lock:
            self._timer = None
        self.reload()

    def reload(self) -> bool:
        """Load the file now. Returns True when it was displayed."""
        result = self.controller.select(self.csv_path)
        if result.is_err():
            error = result.unwrap_err()
            if error.kind == LoadErrorKind.BUSY:
                # Another load is still reading an older version
                logger.debug(f"Reload of {self.csv_path.name} deferred: load in flight")
                self._start_timer(max(self._cooldown, config.WATCH_COOLDOWN_SEC))
                return False
            logger.warning(f"Reload of {self.csv_path.name} failed: {error.kind}")
            return False

        logger.info(f"✅ Loaded {len(result.unwrap())} topics")
        if self.on_loaded:
            self.on_loaded()
        return True


class CsvWatcher:
    """
    Main controller for the watch process.
    """

    def __init__(
        self,
        csv_path: Path,
        controller: FileSelectionController,
        on_loaded: Optional[Callable[[], None]] = None,
    ):
        self.csv_path = csv_path.resolve()
        self.controller = controller
        self.on_loaded = on_loaded
        self.observer: Optional[Observer] = None
        self.handler: Optional[CsvChangeHandler] = None

    def start(self) -> None:
        """Load once, then follow changes until interrupted."""
        handler = CsvChangeHandler(self.csv_path, self.controller, self.on_loaded)
        self.handler = handler
        handler.reload()

        self.observer = Observer()
        # Watch the parent: the file itself may be replaced, not edited in place
        self.observer.schedule(handler, str(self.csv_path.parent), recursive=False)
        self.observer.start()

        logger.info(f"👀 Watching {self.csv_path.name}. Press Ctrl+C to stop.")

        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.stop()

    def stop(self) -> None:
        """Gracefully stop the watcher."""
        logger.info("Stopping watcher...")
        if self.handler:
            self.handler.cancel()
        if self.observer:
            self.observer.stop()
            self.observer.join()
