from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional


class Role(str, Enum):
    """User roles stored on roster entries."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: object, labels: Optional[Mapping[str, "Role"]] = None) -> Optional["Role"]:
        """Return the role whose stored label equals ``value`` exactly, or None."""
        if not isinstance(value, str):
            return None
        return (labels or DEFAULT_ROLE_LABELS).get(value)


def role_labels(*, student: str = "student", teacher: str = "teacher", admin: str = "admin") -> Dict[str, Role]:
    """Map the labels a deployment stores in ``users.role`` to roles."""
    labels = {student: Role.STUDENT, teacher: Role.TEACHER, admin: Role.ADMIN}
    if len(labels) != 3:
        raise ValueError("role labels must be distinct")
    return labels


def label_for(role: Role, labels: Optional[Mapping[str, Role]] = None) -> str:
    for label, mapped in (labels or DEFAULT_ROLE_LABELS).items():
        if mapped is role:
            return label
    raise KeyError(role)


DEFAULT_ROLE_LABELS = role_labels()

# Roles allowed to purge student accounts.
STAFF_ROLES = frozenset({Role.TEACHER, Role.ADMIN})
