from __future__ import annotations

from typing import AbstractSet, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def student_ids_for_session(self, session_id: str) -> AbstractSet[str]:
        """Students that already have any attendance record for the session."""

        raise NotImplementedError

    def finalize_session(self, session_id: str, absences: Sequence[AttendanceRecord]) -> int:
        """Write absence records and mark the session processed, atomically.

        Implementations must re-check inside the atomic unit that the session
        is still unprocessed (otherwise write nothing and return 0) and must
        skip any absence whose (session, student) pair gained a record in the
        meantime. Returns the number of records written.
        """

        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        """Delete every record referencing the student. Returns the count."""

        raise NotImplementedError
