from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    """Roster store interface.

    Note: services depend on this interface, not on Firestore directly.
    """

    def get_by_id(self, user_id: str) -> Optional[RosterEntry]:
        raise NotImplementedError

    def list_students_in_class(self, class_name: str) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        """Delete a roster entry. Returns False if it did not exist."""

        raise NotImplementedError
