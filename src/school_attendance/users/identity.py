from __future__ import annotations

from typing import Protocol


class IdentityProvider(Protocol):
    def verify_token(self, token: str) -> str:
        """Return the subject uid of a bearer token.

        Raises AuthenticationError when the token is invalid, expired or revoked.
        """

        raise NotImplementedError

    def delete_identity(self, uid: str) -> bool:
        """Delete an identity. Returns False if it did not exist."""

        raise NotImplementedError
