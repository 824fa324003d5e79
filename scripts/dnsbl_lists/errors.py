"""Errors raised by the blacklist file store.

Every failure carries an ErrorKind so callers can branch on the kind
instead of parsing message text. Logic errors mean the caller broke a
contract; runtime errors reflect the state of the file system.
"""

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    """Distinct failure kinds of the store"""

    NOT_LOADED = "not_loaded"
    EMPTY_FILE = "empty_file"
    INVALID_INPUT = "invalid_input"
    FILE_NOT_FOUND = "file_not_found"
    READ = "read"
    PATH_RESOLUTION = "path_resolution"
    WRITE_OPEN = "write_open"
    WRITE = "write"
    RENAME = "rename"
    NO_ALIVE_ENTRIES = "no_alive_entries"


class StoreError(Exception):
    """Base class for blacklist store errors"""

    kind: ErrorKind

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class StoreLogicError(StoreError):
    """Caller violated a precondition"""


class StoreRuntimeError(StoreError):
    """File system state prevented the operation"""


class NotLoadedError(StoreLogicError):
    kind = ErrorKind.NOT_LOADED


class EmptyFileError(StoreLogicError):
    kind = ErrorKind.EMPTY_FILE


class InvalidInputError(StoreLogicError):
    kind = ErrorKind.INVALID_INPUT


class ListFileNotFoundError(StoreRuntimeError, FileNotFoundError):
    kind = ErrorKind.FILE_NOT_FOUND


class ReadError(StoreRuntimeError):
    kind = ErrorKind.READ


class PathResolutionError(StoreRuntimeError):
    """No candidate directory holds the anchor file"""

    kind = ErrorKind.PATH_RESOLUTION

    def __init__(self, message: str, candidates: Optional[list[Path]] = None):
        super().__init__(message)
        self.candidates = candidates or []


class WriteOpenError(StoreRuntimeError):
    kind = ErrorKind.WRITE_OPEN


class WriteError(StoreRuntimeError):
    kind = ErrorKind.WRITE


class RenameError(StoreRuntimeError):
    kind = ErrorKind.RENAME


class NoAliveEntriesError(StoreRuntimeError):
    kind = ErrorKind.NO_ALIVE_ENTRIES
