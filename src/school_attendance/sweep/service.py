from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import List, Optional

from ..attendance.model import AttendanceRecord, AttendanceSnapshot
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, format_snapshot_date, format_snapshot_time, system_clock, weekday_label
from ..core.constants import DEFAULT_ABSENT_STATUS, DEFAULT_MISSING_ID_NUMBER, DEFAULT_WEEKDAY_LOCALE
from ..schedules.model import Session
from ..schedules.repository import SessionRepository
from ..users.model import RosterEntry
from ..users.repository import RosterRepository
from .model import SessionFailure, SweepReport

logger = logging.getLogger(__name__)


class AbsenceSweepService:
    """Use case: mark students absent for class sessions that ended without a check-in.

    A session is finalized at most once: its absence records and its processed
    flag are committed together by the attendance repository. Sessions that
    have not ended, or have no usable end time, are left for a later run.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        roster: RosterRepository,
        attendance: AttendanceRepository,
        *,
        zone: tzinfo,
        clock: Optional[Clock] = None,
        weekday_locale: str = DEFAULT_WEEKDAY_LOCALE,
        absent_status: str = DEFAULT_ABSENT_STATUS,
        missing_id_number: str = DEFAULT_MISSING_ID_NUMBER,
    ):
        self._sessions = sessions
        self._roster = roster
        self._attendance = attendance
        self._zone = zone
        self._clock = clock or system_clock(zone)
        self._locale = weekday_locale
        self._absent_status = absent_status
        self._missing_id_number = missing_id_number

    def run(self, *, now: Optional[datetime] = None) -> SweepReport:
        now = (now or self._clock()).astimezone(self._zone)
        day = weekday_label(now, self._locale)
        logger.info("Today is %s (%s)", day, now.isoformat())

        candidates = [s for s in self._sessions.list_for_day(day) if not s.processed]
        report = SweepReport(day=day, started_at=now, candidates=len(candidates))
        logger.info("Found %d unprocessed sessions", len(candidates))

        if not candidates:
            logger.info("No new sessions to process, sweep finished")
            return report

        for session in candidates:
            if session.end_at is None:
                logger.debug("Session %s has no usable end time, skipping", session.session_id)
                report.skipped_missing_end.append(session.session_id)
                continue
            if not session.has_ended(now):
                logger.debug("Session %s ends at %s, not finished yet", session.session_id, session.end_at.isoformat())
                report.skipped_not_ended.append(session.session_id)
                continue

            try:
                marked = self._finalize(session, now=now, day=day)
            except Exception as e:
                logger.exception("Failed to finalize session %s", session.session_id)
                report.failures.append(SessionFailure(session_id=session.session_id, error=str(e)))
                continue

            report.finalized.append(session.session_id)
            report.marked += marked

        logger.info(
            "Sweep finished. Total students marked absent: %d (sessions finalized=%d, failed=%d)",
            report.marked,
            len(report.finalized),
            len(report.failures),
        )
        return report

    def _finalize(self, session: Session, *, now: datetime, day: str) -> int:
        students = self._roster.list_students_in_class(session.class_name)
        recorded = set(self._attendance.student_ids_for_session(session.session_id))

        absences: List[AttendanceRecord] = []
        for student in students:
            if student.user_id in recorded:
                continue
            recorded.add(student.user_id)
            absences.append(self._absence_for(session, student, now=now, day=day))

        written = self._attendance.finalize_session(session.session_id, absences)
        logger.info(
            "Session %s (%s): %d students, %d marked absent",
            session.session_id,
            session.class_name,
            len(students),
            written,
        )
        return written

    def _absence_for(self, session: Session, student: RosterEntry, *, now: datetime, day: str) -> AttendanceRecord:
        return AttendanceRecord(
            session_id=session.session_id,
            student_id=student.user_id,
            student_class=session.class_name,
            student_name=student.name,
            student_number=student.id_number or self._missing_id_number,
            snapshot=AttendanceSnapshot(
                date=format_snapshot_date(now),
                day=day,
                status=self._absent_status,
                subject=session.subject,
                teacher=session.teacher_name,
                time=format_snapshot_time(session.end_at, self._zone),
            ),
            created_at=now,
        )
