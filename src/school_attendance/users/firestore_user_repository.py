from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.constants import USERS_COLLECTION
from ..core.enums import DEFAULT_ROLE_LABELS, Role, label_for
from ..database.connection import FirebaseConnection
from ..database.firestore_base import snapshot_data, where_equal
from .model import RosterEntry
from .repository import RosterRepository


def roster_entry_from_document(
    user_id: str, data: Dict[str, Any], labels: Mapping[str, Role] = DEFAULT_ROLE_LABELS
) -> RosterEntry:
    id_number = data.get("idNumber")
    return RosterEntry(
        user_id=user_id,
        role=Role.parse(data.get("role"), labels),
        name=str(data.get("name") or ""),
        class_name=data.get("studentClass"),
        id_number=str(id_number) if id_number not in (None, "") else None,
    )


class FirestoreRosterRepository(RosterRepository):
    def __init__(self, conn: FirebaseConnection, labels: Mapping[str, Role] = DEFAULT_ROLE_LABELS):
        self._conn = conn
        self._labels = labels

    def _collection(self):
        return self._conn.firestore().collection(USERS_COLLECTION)

    def get_by_id(self, user_id: str) -> Optional[RosterEntry]:
        snapshot = self._collection().document(user_id).get()
        if not snapshot.exists:
            return None
        return roster_entry_from_document(snapshot.id, snapshot_data(snapshot), self._labels)

    def list_students_in_class(self, class_name: str) -> Sequence[RosterEntry]:
        student_label = label_for(Role.STUDENT, self._labels)
        query = where_equal(self._collection(), role=student_label, studentClass=class_name)
        return [roster_entry_from_document(doc.id, doc.to_dict() or {}, self._labels) for doc in query.stream()]

    def delete_by_id(self, user_id: str) -> bool:
        ref = self._collection().document(user_id)
        if not ref.get().exists:
            return False
        ref.delete()
        return True
