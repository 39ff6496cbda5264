"""Run the absence sweep once.

Intended for cron or an external scheduler (e.g. every 5 minutes) when the
in-process scheduler is disabled.
"""
from __future__ import annotations

import sys

from school_attendance.container import build_container
from school_attendance.main import configure_logging, load_settings


def main() -> int:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings=settings)
    report = container.sweep_service.run()
    print(
        f"OK: {report.day} -> {len(report.finalized)}/{report.candidates} sessions finalized, "
        f"{report.marked} students marked absent"
    )
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
