"""
File Selection Controller.

Handles one file selection from start to finish:

1. Clear the previous error and hide the previous results.
2. Reject names that do not end in ".csv".
3. Read the whole file into memory.
4. Decode it with the export's legacy encoding and parse it.
5. Hand the mapping to the presenter, or report why it could not be shown.

Only one selection is processed at a time. A selection that arrives while
another is still in flight is rejected with LoadErrorKind.BUSY.
"""

import logging
import threading
from pathlib import Path
from typing import Union

from . import config
from .core.errors import LoadError, LoadErrorKind
from .core.result import Err, Ok, Result
from .core.types import TopicMapping
from .parsing.csv_parser import CsvParser
from .presenter import ResultPresenter

logger = logging.getLogger(__name__)


class FileSelectionController:
    """
    Connects a file selection to the parser and the presenter.
    """

    def __init__(
        self,
        presenter: ResultPresenter,
        parser: CsvParser | None = None,
        encoding: str = config.DEFAULT_ENCODING,
    ):
        self.presenter = presenter
        self.parser = parser or CsvParser()
        self.encoding = encoding
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def select(self, file_path: Union[str, Path]) -> Result[TopicMapping, LoadError]:
        """
        Load `file_path` and display it.

        Never raises; every failure comes back as Err(LoadError) after its
        message has been shown on the view.
        """
        if not self._in_flight.acquire(blocking=False):
            logger.warning(f"Ignoring {file_path}: another file is still loading")
            return Err(LoadError.of(LoadErrorKind.BUSY))

        try:
            return self._select(Path(file_path))
        finally:
            self._in_flight.release()

    def _select(self, path: Path) -> Result[TopicMapping, LoadError]:
        view = self.presenter.view
        view.clear_error()
        view.hide_results()

        if not self.parser.can_parse(path):
            return self._fail(LoadError.of(LoadErrorKind.INVALID_EXTENSION))

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            return self._fail(LoadError.of(LoadErrorKind.READ_FAILURE, e))

        try:
            mapping = self.parser.parse(content.decode(self.encoding))
        except Exception as e:
            logger.exception(f"Failed to parse {path}")
            return self._fail(LoadError.of(LoadErrorKind.PARSE_FAILURE, e))

        logger.debug(f"Loaded {len(mapping)} topics from {path}")

        if not self.presenter.initialize(mapping):
            return Err(LoadError.of(LoadErrorKind.EMPTY_RESULT))

        return Ok(mapping)

    def _fail(self, error: LoadError) -> Err:
        self.presenter.view.show_error(error.message)
        return Err(error)
