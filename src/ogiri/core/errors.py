"""
Error kinds raised or reported while loading a contest CSV.
"""

from dataclasses import dataclass
from enum import StrEnum

from .. import config


class CsvParseError(Exception):
    """Raised when the parser is handed something it cannot treat as CSV text."""


class LoadErrorKind(StrEnum):
    """Why a file selection did not produce a displayable result."""
    INVALID_EXTENSION = "invalid_extension"
    READ_FAILURE = "read_failure"
    PARSE_FAILURE = "parse_failure"
    EMPTY_RESULT = "empty_result"
    BUSY = "busy"


_MESSAGES = {
    LoadErrorKind.INVALID_EXTENSION: config.MSG_INVALID_EXTENSION,
    LoadErrorKind.READ_FAILURE: config.MSG_READ_FAILURE,
    LoadErrorKind.PARSE_FAILURE: config.MSG_PARSE_FAILURE,
    LoadErrorKind.EMPTY_RESULT: config.MSG_EMPTY_RESULT,
    LoadErrorKind.BUSY: config.MSG_BUSY,
}


@dataclass(frozen=True)
class LoadError:
    """
    A terminal failure for one file selection.

    `message` is what the user sees. `cause` carries the underlying
    exception for logs only.
    """

    kind: LoadErrorKind
    message: str
    cause: Exception | None = None

    @classmethod
    def of(cls, kind: LoadErrorKind, cause: Exception | None = None) -> "LoadError":
        return cls(kind=kind, message=_MESSAGES[kind], cause=cause)
