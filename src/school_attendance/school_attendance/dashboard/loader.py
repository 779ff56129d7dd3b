from __future__ import annotations

import logging
from typing import Callable, Optional

from ..attendance.reconciler import RecordReconciler
from ..common.datetime_utils import now_local
from ..core.exceptions import SourceError
from ..directory.mapper import FALLBACK_ROSTER, roster_from_rows
from ..directory.model import Person
from ..directory.repository import DirectoryRepository
from ..recap.service import MonthlyRecapService
from .model import DashboardBundle, DashboardSnapshot
from .repository import DashboardRepository
from .service import compute_stats

logger = logging.getLogger(__name__)


class DashboardLoader:
    """Fetches roster + dashboard bundle and publishes a fresh snapshot.

    Concurrency note: refreshes are not serialized. The periodic scheduler
    and a manual refresh may overlap; each one works on its own
    (roster, bundle) pair and the last one to finish replaces the published
    snapshot (last write wins). Readers holding an older snapshot keep a
    consistent, immutable view.
    """

    def __init__(
        self,
        directory: DirectoryRepository,
        dashboard: DashboardRepository,
        *,
        reconciler: Optional[RecordReconciler] = None,
        recap_service: Optional[MonthlyRecapService] = None,
        clock: Callable = now_local,
    ):
        self._directory = directory
        self._dashboard = dashboard
        self._reconciler = reconciler or RecordReconciler()
        self._recaps = recap_service or MonthlyRecapService()
        self._clock = clock
        self._snapshot = DashboardSnapshot()

    @property
    def snapshot(self) -> DashboardSnapshot:
        return self._snapshot

    def load_roster(self) -> list[Person]:
        try:
            return roster_from_rows(self._directory.fetch_rows())
        except SourceError as exc:
            logger.warning("Roster fetch failed, using fallback roster: %s", exc)
            return list(FALLBACK_ROSTER)

    def load_bundle(self) -> DashboardBundle:
        try:
            return self._dashboard.fetch_bundle()
        except SourceError as exc:
            logger.warning("Dashboard fetch failed, using empty data: %s", exc)
            return DashboardBundle()

    def refresh(self) -> DashboardSnapshot:
        roster = self.load_roster()
        bundle = self.load_bundle()

        daily = self._reconciler.reconcile(roster, bundle)
        teaching = self._reconciler.teaching_activities(bundle.teaching)
        recaps = self._recaps.build(roster, bundle.attendance)

        snapshot = DashboardSnapshot(
            daily=tuple(daily),
            teaching=tuple(teaching),
            recaps=tuple(recaps),
            stats=compute_stats(daily, teaching, recaps),
            refreshed_at=self._clock(),
        )
        self._snapshot = snapshot
        logger.info(
            "Dashboard refreshed: %d staff, %d present, %d teaching",
            snapshot.stats.total,
            snapshot.stats.present,
            snapshot.stats.teaching,
        )
        return snapshot
