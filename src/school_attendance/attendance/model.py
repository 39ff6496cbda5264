from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceSnapshot:
    """Values copied from the session and clock when the record was written."""

    date: str
    day: str
    status: str
    subject: Optional[str]
    teacher: Optional[str]
    time: str


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for a (session, student) pair.

    ``record_id`` is None until the store assigns one.
    """

    session_id: str
    student_id: str
    student_class: str
    student_name: str
    student_number: str
    snapshot: AttendanceSnapshot
    created_at: datetime
    record_id: Optional[str] = None

    @property
    def status(self) -> str:
        return self.snapshot.status
