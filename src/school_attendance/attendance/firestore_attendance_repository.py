from __future__ import annotations

import logging
from typing import AbstractSet, Any, Dict, Sequence

from google.cloud import firestore

from ..core.constants import ATTENDANCE_COLLECTION, SCHEDULES_COLLECTION
from ..database.connection import FirebaseConnection
from ..database.firestore_base import delete_documents, snapshot_data, where_equal
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def absence_record_id(session_id: str, student_id: str) -> str:
    """Deterministic document id so a second writer collides instead of duplicating."""
    return f"{session_id}_{student_id}"


def attendance_to_document(record_id: str, record: AttendanceRecord) -> Dict[str, Any]:
    snap = record.snapshot
    return {
        "id": record_id,
        "qrData": {
            "date": snap.date,
            "day": snap.day,
            "status": snap.status,
            "subject": snap.subject,
            "teacher": snap.teacher,
            "time": snap.time,
        },
        "scheduleId": record.session_id,
        "studentClass": record.student_class,
        "studentId": record.student_id,
        "studentName": record.student_name,
        "studentNumber": record.student_number,
        "timestamp": record.created_at,
    }


def finalize_in_transaction(transaction, session_ref, attendance, absences: Sequence[AttendanceRecord]) -> int:
    """Write missing absences and set ``autoMarked`` in one transaction.

    Returns the number of absence records created, 0 when another run already
    finalized the session.
    """
    session_id = session_ref.id
    # All reads must happen before the first write in a transaction.
    session = session_ref.get(transaction=transaction)
    if not session.exists or snapshot_data(session).get("autoMarked") is True:
        logger.info("Session %s already finalized by another run", session_id)
        return 0

    existing = {
        snapshot_data(doc).get("studentId")
        for doc in transaction.get(where_equal(attendance, scheduleId=session_id))
    }

    written = 0
    for record in absences:
        if record.student_id in existing:
            continue
        ref = attendance.document(absence_record_id(session_id, record.student_id))
        transaction.create(ref, attendance_to_document(ref.id, record))
        existing.add(record.student_id)
        written += 1

    transaction.update(session_ref, {"autoMarked": True})
    return written


class FirestoreAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: FirebaseConnection):
        self._conn = conn

    def _collection(self):
        return self._conn.firestore().collection(ATTENDANCE_COLLECTION)

    def student_ids_for_session(self, session_id: str) -> AbstractSet[str]:
        query = where_equal(self._collection(), scheduleId=session_id)
        return {snapshot_data(doc).get("studentId") for doc in query.stream()}

    def finalize_session(self, session_id: str, absences: Sequence[AttendanceRecord]) -> int:
        client = self._conn.firestore()
        session_ref = client.collection(SCHEDULES_COLLECTION).document(session_id)
        return firestore.transactional(finalize_in_transaction)(
            client.transaction(), session_ref, self._collection(), absences
        )

    def delete_for_student(self, student_id: str) -> int:
        query = where_equal(self._collection(), studentId=student_id)
        refs = [doc.reference for doc in query.stream()]
        return delete_documents(self._conn.firestore(), refs)
