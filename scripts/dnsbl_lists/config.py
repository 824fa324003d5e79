"""Configuration for blacklist file handling."""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Anchor file that marks a directory as the blacklist data directory
MASTER_FILE = "blacklists.txt"
ALIVE_FILE = "blacklistsAlive.txt"

# Scratch files are created as blacklistsAlive.<random>.tmp
ALIVE_TMP_PREFIX = "blacklistsAlive."
ALIVE_TMP_SUFFIX = ".tmp"

PACKAGE_DIR = Path(__file__).resolve().parent


def default_candidates() -> list[str]:
    """Ordered directories probed when no explicit path is configured.

    1. Bundled data directory next to the package (standard install)
    2. Vendored checkout at the repository root (CI, vendored setups)
    """
    return [
        str(PACKAGE_DIR / "data"),
        str(
            PACKAGE_DIR.parents[1]
            / "vendor"
            / "mxtoolbox-blacklists"
            / "mxtoolbox-blacklists"
        ),
    ]


@dataclass
class StoreConfig:
    """Configuration for the blacklist store and its liveness checks."""

    # Explicit base path (empty = auto-detect from candidates)
    path: str = ""

    # Candidate directories for auto-detection, probed in order
    candidates: list[str] = field(default_factory=default_candidates)

    master_file: str = MASTER_FILE

    # Liveness check settings
    liveness_timeout: float = 5.0
    liveness_workers: int = 20
    dns_server: str = ""  # Custom resolver IP (empty = system resolver)

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables."""
        candidates_env = os.environ.get("DNSBL_LISTS_CANDIDATES", "")
        candidates = (
            [c.strip() for c in candidates_env.split(",") if c.strip()]
            if candidates_env
            else default_candidates()
        )

        return cls(
            path=os.environ.get("DNSBL_LISTS_PATH", ""),
            candidates=candidates,
            master_file=os.environ.get("DNSBL_LISTS_FILE", MASTER_FILE),
            liveness_timeout=float(os.environ.get("DNSBL_LIVENESS_TIMEOUT", "5")),
            liveness_workers=int(os.environ.get("DNSBL_LIVENESS_WORKERS", "20")),
            dns_server=os.environ.get("DNSBL_DNS_SERVER", ""),
        )
