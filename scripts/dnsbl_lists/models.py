"""Data models for blacklist file handling."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class StoreState(str, Enum):
    """Lifecycle of a BlacklistStore"""

    UNCONFIGURED = "unconfigured"
    PATH_SET = "path_set"
    LOADED = "loaded"


@dataclass
class AliveCheckResult:
    """Result of a DNSBL liveness check."""

    host_name: str  # DNSBL zone (e.g., bl.spamcop.net)
    is_responsive: bool
    error: str = ""  # Error message if the check failed
    check_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
