from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from types import ModuleType
from typing import Optional

from .attendance.firestore_attendance_repository import FirestoreAttendanceRepository
from .attendance.repository import AttendanceRepository
from .common.datetime_utils import school_zone
from .core.constants import (
    DEFAULT_ABSENT_STATUS,
    DEFAULT_MISSING_ID_NUMBER,
    DEFAULT_SCHOOL_TIMEZONE,
    DEFAULT_WEEKDAY_LOCALE,
)
from .core.enums import role_labels
from .database.connection import FirebaseConfig, FirebaseConnection
from .diagnostics.service import DiagnosticService
from .schedules.firestore_schedule_repository import FirestoreSessionRepository
from .schedules.repository import SessionRepository
from .sweep.service import AbsenceSweepService
from .users.firebase_identity_provider import FirebaseIdentityProvider
from .users.identity import IdentityProvider
from .users.firestore_user_repository import FirestoreRosterRepository
from .users.repository import RosterRepository
from .users.service import AccountService


@dataclass(frozen=True)
class Container:
    zone: tzinfo

    sessions_repo: SessionRepository
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository
    identity: IdentityProvider

    sweep_service: AbsenceSweepService
    account_service: AccountService
    diagnostic_service: DiagnosticService

    conn: Optional[FirebaseConnection] = None


def build_container(*, settings: ModuleType) -> Container:
    conn = FirebaseConnection.initialize(
        FirebaseConfig(
            credentials_path=str(getattr(settings, "FIREBASE_CREDENTIALS", "") or ""),
            project_id=getattr(settings, "FIREBASE_PROJECT_ID", None),
        )
    )
    zone = school_zone(getattr(settings, "SCHOOL_TIMEZONE", DEFAULT_SCHOOL_TIMEZONE))

    labels = role_labels(
        student=getattr(settings, "STUDENT_ROLE_LABEL", "student"),
        teacher=getattr(settings, "TEACHER_ROLE_LABEL", "teacher"),
        admin=getattr(settings, "ADMIN_ROLE_LABEL", "admin"),
    )

    sessions_repo = FirestoreSessionRepository(conn)
    roster_repo = FirestoreRosterRepository(conn, labels)
    attendance_repo = FirestoreAttendanceRepository(conn)
    identity = FirebaseIdentityProvider(conn)

    sweep_service = AbsenceSweepService(
        sessions_repo,
        roster_repo,
        attendance_repo,
        zone=zone,
        weekday_locale=getattr(settings, "WEEKDAY_LOCALE", DEFAULT_WEEKDAY_LOCALE),
        absent_status=getattr(settings, "ABSENT_STATUS", DEFAULT_ABSENT_STATUS),
        missing_id_number=getattr(settings, "MISSING_ID_NUMBER", DEFAULT_MISSING_ID_NUMBER),
    )
    account_service = AccountService(roster_repo, attendance_repo, identity)

    return Container(
        zone=zone,
        sessions_repo=sessions_repo,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        identity=identity,
        sweep_service=sweep_service,
        account_service=account_service,
        diagnostic_service=DiagnosticService(),
        conn=conn,
    )
