from __future__ import annotations

import logging
from datetime import tzinfo

from apscheduler.schedulers.background import BackgroundScheduler

from ..core.constants import DEFAULT_SWEEP_INTERVAL_MINUTES
from .service import AbsenceSweepService

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "auto_mark_absent"


def build_scheduler(
    service: AbsenceSweepService,
    *,
    zone: tzinfo,
    interval_minutes: int = DEFAULT_SWEEP_INTERVAL_MINUTES,
) -> BackgroundScheduler:
    """Background scheduler running the absence sweep on a fixed interval.

    One run at a time; missed runs collapse into a single catch-up run.
    """

    scheduler = BackgroundScheduler(timezone=zone)
    scheduler.add_job(
        service.run,
        "interval",
        minutes=int(interval_minutes),
        id=SWEEP_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def start_scheduler(scheduler: BackgroundScheduler) -> BackgroundScheduler:
    if not scheduler.running:
        scheduler.start()
        logger.info("Absence sweep scheduler started")
    return scheduler
