from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from ..core.constants import DEFAULT_REFRESH_INTERVAL_SECONDS, MAX_OVERLAPPING_REFRESHES

logger = logging.getLogger(__name__)

JOB_ID = "dashboard_refresh"


class RefreshScheduler:
    """Calls ``callback`` every ``interval_seconds`` on an APScheduler background scheduler.

    Up to MAX_OVERLAPPING_REFRESHES runs may overlap (no overlap guard); missed
    runs are coalesced into one. ``stop()`` only prevents new triggers; a
    refresh already running is left to finish.
    """

    def __init__(self, callback: Callable[[], object], *, interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._callback = callback
        self._interval = float(interval_seconds)
        self._scheduler: Optional[BackgroundScheduler] = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self, *, run_immediately: bool = True) -> None:
        if self.running:
            return

        scheduler = BackgroundScheduler(daemon=True)
        job_options = {}
        if run_immediately:
            job_options["next_run_time"] = datetime.now(timezone.utc)
        scheduler.add_job(
            self._tick,
            "interval",
            seconds=self._interval,
            id=JOB_ID,
            max_instances=MAX_OVERLAPPING_REFRESHES,
            coalesce=True,
            replace_existing=True,
            **job_options,
        )
        scheduler.start()
        self._scheduler = scheduler

    def stop(self) -> None:
        scheduler, self._scheduler = self._scheduler, None
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)

    def _tick(self) -> None:
        try:
            self._callback()
        except Exception:
            logger.exception("Scheduled refresh failed")
