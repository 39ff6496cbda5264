from __future__ import annotations

from datetime import datetime, timezone

import pytest
from firebase_admin import auth

from school_attendance.attendance.firestore_attendance_repository import finalize_in_transaction
from school_attendance.attendance.model import AttendanceRecord, AttendanceSnapshot
from school_attendance.core.enums import Role, role_labels
from school_attendance.core.exceptions import AuthenticationError
from school_attendance.users.firebase_identity_provider import FirebaseIdentityProvider
from school_attendance.users.firestore_user_repository import FirestoreRosterRepository


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeRef:
    def __init__(self, store, doc_id):
        self._store = store
        self.id = doc_id

    def get(self, transaction=None):
        return FakeSnapshot(self.id, self._store.docs.get(self.id))

    def delete(self):
        self._store.docs.pop(self.id, None)


class FakeCollection:
    """Collection and query in one; ``where`` narrows by equality filters."""

    def __init__(self, docs=None, filters=()):
        self.docs = docs if docs is not None else {}
        self.filters = tuple(filters)

    def document(self, doc_id):
        return FakeRef(self, doc_id)

    def where(self, *, filter):
        return FakeCollection(self.docs, self.filters + ((filter.field_path, filter.value),))

    def stream(self):
        for doc_id, data in self.docs.items():
            if all(data.get(field) == value for field, value in self.filters):
                yield FakeSnapshot(doc_id, data)


class FakeTransaction:
    def __init__(self):
        self.created = []
        self.updated = []

    def get(self, query):
        return query.stream()

    def create(self, ref, data):
        self.created.append((ref.id, data))

    def update(self, ref, data):
        self.updated.append((ref.id, data))


def absence(student_id):
    return AttendanceRecord(
        session_id="S1",
        student_id=student_id,
        student_class="10A",
        student_name=student_id,
        student_number="no id",
        snapshot=AttendanceSnapshot(date="02/02/2026", day="Monday", status="absent", subject="Biology", teacher="Mr. Hadi", time="08:00"),
        created_at=datetime(2026, 2, 2, 1, 5, tzinfo=timezone.utc),
    )


def test_finalize_skips_already_marked_session():
    schedules = FakeCollection({"S1": {"day": "Monday", "autoMarked": True}})
    attendance = FakeCollection()
    tx = FakeTransaction()

    written = finalize_in_transaction(tx, schedules.document("S1"), attendance, [absence("B")])

    assert written == 0
    assert tx.created == []
    assert tx.updated == []


def test_finalize_skips_missing_session():
    tx = FakeTransaction()

    written = finalize_in_transaction(tx, FakeCollection().document("S1"), FakeCollection(), [absence("B")])

    assert written == 0
    assert tx.created == []
    assert tx.updated == []


def test_finalize_creates_missing_absences_and_marks_session():
    schedules = FakeCollection({"S1": {"day": "Monday", "autoMarked": False}})
    attendance = FakeCollection(
        {
            "rec-a": {"scheduleId": "S1", "studentId": "A", "qrData": {"status": "present"}},
            "rec-other": {"scheduleId": "S2", "studentId": "B"},
        }
    )
    tx = FakeTransaction()

    written = finalize_in_transaction(tx, schedules.document("S1"), attendance, [absence("A"), absence("B"), absence("B")])

    assert written == 1
    assert [doc_id for doc_id, _ in tx.created] == ["S1_B"]
    doc = tx.created[0][1]
    assert doc["id"] == "S1_B"
    assert doc["studentId"] == "B"
    assert doc["scheduleId"] == "S1"
    assert doc["qrData"]["status"] == "absent"
    assert tx.updated == [("S1", {"autoMarked": True})]


def test_finalize_with_no_absences_still_marks_session():
    schedules = FakeCollection({"S1": {"day": "Monday"}})
    tx = FakeTransaction()

    assert finalize_in_transaction(tx, schedules.document("S1"), FakeCollection(), []) == 0
    assert tx.updated == [("S1", {"autoMarked": True})]


class FakeClient:
    def __init__(self, users):
        self.users = users

    def collection(self, name):
        assert name == "users"
        return self.users


class FakeConnection:
    app = "test-app"

    def __init__(self, client=None):
        self._client = client

    def firestore(self):
        return self._client


def test_roster_delete_by_id_reports_whether_entry_existed():
    users = FakeCollection({"B": {"role": "student", "studentClass": "10A"}})
    repo = FirestoreRosterRepository(FakeConnection(FakeClient(users)))

    assert repo.delete_by_id("B") is True
    assert "B" not in users.docs
    assert repo.delete_by_id("B") is False


def test_roster_uses_configured_role_labels():
    users = FakeCollection(
        {
            "B": {"role": "siswa", "studentClass": "10A", "name": "Budi"},
            "C": {"role": "student", "studentClass": "10A", "name": "Citra"},
            "G": {"role": "guru", "name": "Pak Hadi"},
        }
    )
    labels = role_labels(student="siswa", teacher="guru", admin="admin")
    repo = FirestoreRosterRepository(FakeConnection(FakeClient(users)), labels)

    students = repo.list_students_in_class("10A")

    assert [s.user_id for s in students] == ["B"]
    assert students[0].role == Role.STUDENT
    assert repo.get_by_id("G").role == Role.TEACHER
    assert repo.get_by_id("C").role is None


def test_role_labels_match_exactly():
    assert Role.parse("admin") == Role.ADMIN
    assert Role.parse("Admin") is None
    assert Role.parse("TEACHER") is None
    assert Role.parse(" student") is None
    assert Role.parse(None) is None


def test_role_labels_must_be_distinct():
    with pytest.raises(ValueError):
        role_labels(student="x", teacher="x")


def test_identity_provider_maps_invalid_token(monkeypatch):
    def verify(token, app=None):
        raise auth.InvalidIdTokenError("bad token")

    monkeypatch.setattr(auth, "verify_id_token", verify)
    provider = FirebaseIdentityProvider(FakeConnection())

    with pytest.raises(AuthenticationError):
        provider.verify_token("nope")


def test_identity_provider_returns_uid(monkeypatch):
    seen = {}

    def verify(token, app=None):
        seen["app"] = app
        return {"uid": "admin-1"}

    monkeypatch.setattr(auth, "verify_id_token", verify)

    assert FirebaseIdentityProvider(FakeConnection()).verify_token("tok") == "admin-1"
    assert seen["app"] == "test-app"


def test_identity_provider_propagates_unexpected_errors(monkeypatch):
    def verify(token, app=None):
        raise RuntimeError("network down")

    monkeypatch.setattr(auth, "verify_id_token", verify)

    with pytest.raises(RuntimeError):
        FirebaseIdentityProvider(FakeConnection()).verify_token("tok")


def test_identity_provider_delete_is_retry_safe(monkeypatch):
    deleted = []

    def delete(uid, app=None):
        if uid in deleted:
            raise auth.UserNotFoundError("no user")
        deleted.append(uid)

    monkeypatch.setattr(auth, "delete_user", delete)
    provider = FirebaseIdentityProvider(FakeConnection())

    assert provider.delete_identity("B") is True
    assert provider.delete_identity("B") is False
