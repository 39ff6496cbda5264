from __future__ import annotations

from typing import Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def list_for_day(self, day: str) -> Sequence[Session]:
        """All sessions whose weekday label equals ``day`` (processed or not)."""

        raise NotImplementedError
