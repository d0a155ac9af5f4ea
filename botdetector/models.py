"""Bot Detector - Data models"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List


class FlagCategory(Enum):
    """Reason a request was flagged. Declaration order is report order."""
    BAD_USER_AGENT = "BAD UA"
    NO_STATIC_ASSETS = "NO STATIC"
    TOO_FREQUENT = "FREQUENT"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsedRequest:
    """One matched access log line"""
    ip: str
    timestamp: datetime
    timestamp_raw: str
    method: str
    path: str
    user_agent: str


@dataclass
class ClientState:
    """Per-IP history kept for the length of a run.

    ``recent_timestamps`` holds request instants in the order they were seen
    and is pruned to the rapid-fire window. ``static_hits`` is never reset.
    """
    recent_timestamps: List[datetime] = field(default_factory=list)
    static_hits: int = 0

    def record(self, timestamp: datetime):
        self.recent_timestamps.append(timestamp)

    def prune(self, now: datetime, window: timedelta) -> int:
        """Drop timestamps older than ``window`` relative to ``now``.

        Entries later than ``now`` (out-of-order lines) are kept.
        Returns the number of entries removed.
        """
        before = len(self.recent_timestamps)
        self.recent_timestamps = [
            t for t in self.recent_timestamps if now - t <= window
        ]
        return before - len(self.recent_timestamps)

    @property
    def window_count(self) -> int:
        return len(self.recent_timestamps)


@dataclass(frozen=True)
class FlagEvent:
    """A request flagged under one category"""
    ip: str
    timestamp: str
    method: str
    path: str
    user_agent: str
    category: FlagCategory

    @classmethod
    def from_request(cls, request: ParsedRequest, category: FlagCategory) -> "FlagEvent":
        return cls(
            ip=request.ip,
            timestamp=request.timestamp_raw,
            method=request.method,
            path=request.path,
            user_agent=request.user_agent,
            category=category
        )


@dataclass(frozen=True)
class Summary:
    """Final counters for a run.

    ``total_flagged`` counts flags, not requests: a request flagged under two
    categories adds two. ``flag_rate`` is NaN when nothing was checked.
    """
    total_checked: int
    bad_user_agent: int
    no_static_assets: int
    too_frequent: int
    total_flagged: int
    flag_rate: float


@dataclass
class Report:
    """Result of analyzing one log"""
    flags: List[FlagEvent]
    summary: Summary
