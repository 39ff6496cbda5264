from __future__ import annotations

from typing import Any, Dict, Sequence

from ..common.datetime_utils import parse_instant
from ..core.constants import SCHEDULES_COLLECTION
from ..database.connection import FirebaseConnection
from ..database.firestore_base import where_equal
from .model import Session
from .repository import SessionRepository


def session_from_document(session_id: str, data: Dict[str, Any]) -> Session:
    return Session(
        session_id=session_id,
        day=str(data.get("day") or ""),
        class_name=str(data.get("className") or ""),
        end_at=parse_instant(data.get("endTimestamp")),
        processed=data.get("autoMarked") is True,
        subject=data.get("subject"),
        teacher_name=data.get("teacherName"),
    )


class FirestoreSessionRepository(SessionRepository):
    def __init__(self, conn: FirebaseConnection):
        self._conn = conn

    def list_for_day(self, day: str) -> Sequence[Session]:
        col = self._conn.firestore().collection(SCHEDULES_COLLECTION)
        return [session_from_document(doc.id, doc.to_dict() or {}) for doc in where_equal(col, day=day).stream()]
