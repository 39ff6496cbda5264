from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_non_empty
from ..core.enums import STAFF_ROLES
from ..core.exceptions import AuthenticationError, AuthorizationError
from .identity import IdentityProvider
from .repository import RosterRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurgeResult:
    target_uid: str
    identity_deleted: bool
    roster_deleted: bool
    attendance_deleted: int


class AccountService:
    """Use case: teachers and admins permanently delete a student account."""

    def __init__(self, roster: RosterRepository, attendance: AttendanceRepository, identity: IdentityProvider):
        self._roster = roster
        self._attendance = attendance
        self._identity = identity

    def authenticate(self, token: Optional[str]) -> str:
        if not token:
            raise AuthenticationError("Authorization token is required")
        return self._identity.verify_token(token)

    def purge_account(self, *, token: Optional[str], target_uid: Optional[str]) -> PurgeResult:
        """Delete the identity, the roster entry and every attendance record of ``target_uid``.

        The three steps are not transactional. Each one tolerates data that is
        already gone, so a retry after a partial failure finishes the job.
        """

        if not token:
            raise AuthenticationError("Authorization token is required")
        target_uid = require_non_empty(target_uid, "uid")

        caller_uid = self.authenticate(token)
        caller = self._roster.get_by_id(caller_uid)
        if caller is None or caller.role not in STAFF_ROLES:
            logger.warning("User %s is not allowed to delete accounts", caller_uid)
            raise AuthorizationError("Access denied")

        identity_deleted = self._identity.delete_identity(target_uid)
        roster_deleted = self._roster.delete_by_id(target_uid)
        attendance_deleted = self._attendance.delete_for_student(target_uid)

        logger.info(
            "Account %s deleted by %s (identity=%s, roster=%s, attendance records=%d)",
            target_uid,
            caller_uid,
            identity_deleted,
            roster_deleted,
            attendance_deleted,
        )
        return PurgeResult(
            target_uid=target_uid,
            identity_deleted=identity_deleted,
            roster_deleted=roster_deleted,
            attendance_deleted=attendance_deleted,
        )
