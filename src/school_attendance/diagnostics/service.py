from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EchoResult:
    success: bool
    message: str


class DiagnosticService:
    """Echo call used to check the authenticated request path. Touches no store."""

    def echo(self, *, target_uid: Optional[str], caller_uid: Optional[str]) -> EchoResult:
        logger.info("Diagnostic call by %s, target UID: %s", caller_uid or "anonymous", target_uid)
        return EchoResult(success=True, message=f"Function called with UID: {target_uid}")
