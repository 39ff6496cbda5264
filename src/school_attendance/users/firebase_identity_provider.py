from __future__ import annotations

import logging

from firebase_admin import auth

from ..core.exceptions import AuthenticationError
from ..database.connection import FirebaseConnection
from .identity import IdentityProvider

logger = logging.getLogger(__name__)

# Token problems the caller can fix; anything else is an internal failure.
_INVALID_TOKEN_ERRORS = (
    auth.InvalidIdTokenError,
    auth.ExpiredIdTokenError,
    auth.RevokedIdTokenError,
    auth.UserDisabledError,
)


class FirebaseIdentityProvider(IdentityProvider):
    def __init__(self, conn: FirebaseConnection):
        self._conn = conn

    def verify_token(self, token: str) -> str:
        try:
            decoded = auth.verify_id_token(token, app=self._conn.app)
        except _INVALID_TOKEN_ERRORS as e:
            logger.warning("Token verification failed: %s", e)
            raise AuthenticationError("Invalid or expired token") from e
        return str(decoded["uid"])

    def delete_identity(self, uid: str) -> bool:
        try:
            auth.delete_user(uid, app=self._conn.app)
        except auth.UserNotFoundError:
            logger.info("Identity %s already absent from the provider", uid)
            return False
        return True
