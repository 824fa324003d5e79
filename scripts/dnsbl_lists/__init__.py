"""DNSBL host name list package.

Public API:
    - BlacklistStore: Master and alive blacklist files
    - LivenessChecker: Produces alive check results for DNSBL zones
    - StoreConfig: Configuration dataclass
    - AliveCheckResult: Liveness check result model
    - StoreState: Store lifecycle state

Errors:
    - StoreError: Base class, carries an ErrorKind
    - StoreLogicError / StoreRuntimeError and their subclasses
"""

from .config import StoreConfig
from .errors import (
    EmptyFileError,
    ErrorKind,
    InvalidInputError,
    ListFileNotFoundError,
    NoAliveEntriesError,
    NotLoadedError,
    PathResolutionError,
    ReadError,
    RenameError,
    StoreError,
    StoreLogicError,
    StoreRuntimeError,
    WriteError,
    WriteOpenError,
)
from .liveness import LivenessChecker
from .models import AliveCheckResult, StoreState
from .store import BlacklistStore

__all__ = [
    # Main API
    "BlacklistStore",
    "LivenessChecker",
    "StoreConfig",
    "AliveCheckResult",
    "StoreState",
    # Errors
    "ErrorKind",
    "StoreError",
    "StoreLogicError",
    "StoreRuntimeError",
    "NotLoadedError",
    "EmptyFileError",
    "InvalidInputError",
    "ListFileNotFoundError",
    "ReadError",
    "PathResolutionError",
    "WriteOpenError",
    "WriteError",
    "RenameError",
    "NoAliveEntriesError",
]
