from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class SessionFailure:
    session_id: str
    error: str


@dataclass
class SweepReport:
    """Outcome of one sweep run, used for logging and tests."""

    day: str
    started_at: datetime
    candidates: int = 0
    finalized: List[str] = field(default_factory=list)
    skipped_missing_end: List[str] = field(default_factory=list)
    skipped_not_ended: List[str] = field(default_factory=list)
    failures: List[SessionFailure] = field(default_factory=list)
    marked: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures
