"""
Blacklist File Store

Reads the master DNSBL host name list from disk and maintains the derived
list of alive blacklists. The alive list is rebuilt in a scratch file and
renamed over the public file, so readers only ever see a complete list.
"""

import logging
import os
import stat
import tempfile
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Optional, Union

from .config import (
    ALIVE_FILE,
    ALIVE_TMP_PREFIX,
    ALIVE_TMP_SUFFIX,
    MASTER_FILE,
    StoreConfig,
    default_candidates,
)
from .errors import (
    EmptyFileError,
    InvalidInputError,
    ListFileNotFoundError,
    NoAliveEntriesError,
    NotLoadedError,
    PathResolutionError,
    ReadError,
    RenameError,
    WriteError,
    WriteOpenError,
)
from .models import AliveCheckResult, StoreState

PathLike = Union[str, Path]
AliveInput = Union[AliveCheckResult, Mapping[str, Any]]

# Accepted mapping keys, in lookup order
HOST_NAME_KEYS = ("host_name", "hostName", "blHostName")
RESPONSIVE_KEYS = ("is_responsive", "isResponsive", "blResponse")


class BlacklistStore:
    """
    Persisted DNSBL host name lists.

    Lifecycle: UNCONFIGURED -> (resolve_path) -> PATH_SET -> (load) -> LOADED.
    Operations that need the base path resolve it lazily.
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        candidates: Optional[Sequence[PathLike]] = None,
        master_name: str = MASTER_FILE,
    ):
        self.logger = logging.getLogger(__name__)
        if candidates is None:
            candidates = default_candidates()
        self.candidates = [Path(c) for c in candidates]
        self.master_name = master_name
        self._base_path: Optional[Path] = None
        self._host_names: Optional[list[str]] = None

        if path:
            self.resolve_path(path)

    @classmethod
    def from_config(cls, config: StoreConfig) -> "BlacklistStore":
        """Create a store from configuration."""
        return cls(
            path=config.path or None,
            candidates=config.candidates,
            master_name=config.master_file,
        )

    # ─────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────

    @property
    def state(self) -> StoreState:
        if self._base_path is None:
            return StoreState.UNCONFIGURED
        if self._host_names is None:
            return StoreState.PATH_SET
        return StoreState.LOADED

    @property
    def base_path(self) -> Optional[Path]:
        """Resolved base directory, or None if not resolved yet."""
        return self._base_path

    @property
    def master_file(self) -> Path:
        """Configured master list in the base path."""
        return self.resolve_path() / self.master_name

    @property
    def alive_file(self) -> Path:
        return self.resolve_path() / ALIVE_FILE

    def reset(self) -> None:
        """Forget the base path and the loaded list."""
        self._base_path = None
        self._host_names = None

    # ─────────────────────────────────────────────────────────────────
    # Path resolution
    # ─────────────────────────────────────────────────────────────────

    def resolve_path(self, explicit_path: Optional[PathLike] = None) -> Path:
        """
        Set or auto-detect the directory holding the blacklist files.

        An explicit path is adopted as given; its existence is checked on
        first use. Without one, the candidate directories are probed in
        order and the first containing the anchor file wins.

        Args:
            explicit_path: Directory to use instead of auto-detection

        Returns:
            The resolved base path

        Raises:
            PathResolutionError: No candidate directory holds the anchor file
        """
        if explicit_path is not None:
            new_path = Path(explicit_path)
            if self._base_path is not None and new_path != self._base_path:
                # A list loaded from another directory does not belong here
                self._host_names = None
            self._base_path = new_path
            self.logger.debug(f"Using configured blacklist path: {self._base_path}")
            return self._base_path

        if self._base_path is not None:
            return self._base_path

        for candidate in self.candidates:
            anchor = candidate / MASTER_FILE
            if anchor.is_file():
                self._base_path = candidate
                self.logger.info(f"Detected blacklist path: {candidate}")
                return candidate
            self.logger.debug(f"No {MASTER_FILE} in {candidate}")

        raise PathResolutionError(
            f"No {MASTER_FILE} found in any standard path: "
            f"{', '.join(str(c) for c in self.candidates) or '(no candidates)'}",
            candidates=list(self.candidates),
        )

    # ─────────────────────────────────────────────────────────────────
    # Reading
    # ─────────────────────────────────────────────────────────────────

    def load(self, file_name: Optional[str] = None) -> list[str]:
        """
        Load host names from a file in the base path.

        Without a file name the configured master list is loaded.

        Blank lines and line terminators are dropped, order and duplicates
        are kept. A successful load replaces the previously loaded list.

        Raises:
            ListFileNotFoundError: File is missing or not readable
            ReadError: Reading the file failed
            EmptyFileError: File holds no host names
        """
        if file_name is None:
            target = self.master_file
        else:
            target = self.resolve_path() / file_name

        if not target.is_file() or not os.access(target, os.R_OK):
            raise ListFileNotFoundError(
                f"Blacklists file does not exist in: {target}", path=target
            )

        try:
            content = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(
                f"Cannot get contents from {target}: {e}", path=target
            ) from e

        host_names = [line for line in content.splitlines() if line.strip()]
        if not host_names:
            raise EmptyFileError(f"Blacklist file {target} is empty", path=target)

        self._host_names = host_names
        self.logger.info(f"Loaded {len(host_names)} blacklists from {target}")
        return list(host_names)

    def load_alive(self) -> list[str]:
        """Load the alive subset written by write_alive_subset()."""
        return self.load(ALIVE_FILE)

    def get_host_names(self) -> list[str]:
        """
        Return the loaded host names.

        Raises:
            NotLoadedError: Nothing has been loaded yet
        """
        if not self._host_names:
            raise NotLoadedError("Blacklist is not loaded, load blacklist first")
        return list(self._host_names)

    # ─────────────────────────────────────────────────────────────────
    # Alive subset
    # ─────────────────────────────────────────────────────────────────

    def write_alive_subset(self, results: Sequence[AliveInput]) -> Path:
        """
        Rebuild the alive blacklists file from liveness check results.

        Responsive host names are written in input order to a uniquely
        named scratch file which then replaces the alive file. On any
        failure the previous alive file is left as it was.

        Args:
            results: Check results; AliveCheckResult or mappings with
                host name and responsiveness keys

        Returns:
            Path of the alive blacklists file

        Raises:
            InvalidInputError: Results are empty or an entry has no host name
            WriteOpenError: Scratch file cannot be created
            WriteError: Writing the scratch file failed
            NoAliveEntriesError: No result is responsive
            RenameError: Scratch file cannot replace the alive file
        """
        entries = self._normalize_results(results)

        base_path = self.resolve_path()
        alive_file = self.alive_file

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=ALIVE_TMP_PREFIX, suffix=ALIVE_TMP_SUFFIX, dir=base_path
            )
        except OSError as e:
            raise WriteOpenError(
                f"Cannot create new file in {base_path}: {e}", path=base_path
            ) from e
        tmp_path = Path(tmp_name)

        alive_count = 0
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                for host_name, is_responsive in entries:
                    if is_responsive:
                        fh.write(host_name + "\n")
                        alive_count += 1
        except OSError as e:
            self._discard(tmp_path)
            raise WriteError(
                f"Cannot write file {tmp_path}: {e}", path=tmp_path
            ) from e

        if alive_count == 0:
            self._discard(tmp_path)
            raise NoAliveEntriesError(
                f"Blacklist temp file is empty: {tmp_path}", path=tmp_path
            )

        try:
            os.chmod(tmp_path, self._alive_file_mode(alive_file))
        except OSError as e:
            self._discard(tmp_path)
            raise WriteError(
                f"Cannot set permissions on {tmp_path}: {e}", path=tmp_path
            ) from e

        try:
            os.replace(tmp_path, alive_file)
        except OSError as e:
            self._discard(tmp_path)
            raise RenameError(
                f"Cannot create alive blacklist file {alive_file}: {e}",
                path=alive_file,
            ) from e

        self.logger.info(
            f"Wrote {alive_count} of {len(entries)} blacklists to {alive_file}"
        )
        return alive_file

    def delete_alive_subset(self) -> bool:
        """
        Delete the alive blacklists file if it exists.

        Returns:
            True if a file was removed
        """
        alive_file = self.alive_file
        try:
            alive_file.unlink()
        except FileNotFoundError:
            self.logger.debug(f"No alive blacklist file at {alive_file}")
            return False

        self.logger.info(f"Deleted alive blacklist file {alive_file}")
        return True

    # ─────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────

    def _normalize_results(
        self, results: Sequence[AliveInput]
    ) -> list[tuple[str, bool]]:
        """Validate every result before any file is touched."""
        if not results:
            raise InvalidInputError(
                "No check results given, build test results first"
            )

        entries: list[tuple[str, bool]] = []
        for index, result in enumerate(results):
            if isinstance(result, AliveCheckResult):
                host_name: Any = result.host_name
                is_responsive: Any = result.is_responsive
            elif isinstance(result, Mapping):
                host_name = _first_key(result, HOST_NAME_KEYS)
                is_responsive = _first_key(result, RESPONSIVE_KEYS)
            else:
                raise InvalidInputError(
                    f"Unsupported check result at index {index}: {type(result).__name__}"
                )

            if not isinstance(host_name, str) or not host_name.strip():
                raise InvalidInputError(
                    f"Cannot find host name in result at index {index}"
                )

            entries.append((host_name, bool(is_responsive)))

        return entries

    def _alive_file_mode(self, alive_file: Path) -> int:
        """Mode of the current alive file, or the umask default for a new one."""
        try:
            return stat.S_IMODE(alive_file.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _discard(self, tmp_path: Path) -> None:
        """Remove a scratch file, logging instead of masking the original error."""
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.warning(f"Failed to remove temp file {tmp_path}: {e}")


def _first_key(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None
