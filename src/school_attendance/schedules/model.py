from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Session:
    """One scheduled class occurrence.

    ``end_at`` is None when the stored end timestamp is missing or unparsable.
    ``processed`` only ever moves from False to True.
    """

    session_id: str
    day: str
    class_name: str
    end_at: Optional[datetime]
    processed: bool = False
    subject: Optional[str] = None
    teacher_name: Optional[str] = None

    def has_ended(self, now: datetime) -> bool:
        """True strictly after the end time; a missing end time never ends."""
        return self.end_at is not None and now > self.end_at
