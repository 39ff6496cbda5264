from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class RosterEntry:
    """Domain entity: a user record from the roster.

    ``role`` is None for roles this system does not act on.
    """

    user_id: str
    role: Optional[Role]
    name: str = ""
    class_name: Optional[str] = None
    id_number: Optional[str] = None
