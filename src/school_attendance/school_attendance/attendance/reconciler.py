from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_clock
from ..core.enums import PunchType
from ..dashboard.model import AttendancePunch, DashboardBundle, LeaveEntry, TeachingSession
from ..directory.model import Person
from ..directory.roster import operational_roster
from .decision_table import StatusDecisionTable
from .model import DailyStatus, TeachingActivity
from .strategies.base import StatusContext


def _first_punch(punches: Iterable[AttendancePunch], punch_type: PunchType) -> Optional[AttendancePunch]:
    return next((p for p in punches if p.type == punch_type.value), None)


def _first_leave(leaves: Iterable[LeaveEntry], nip: str) -> Optional[LeaveEntry]:
    return next((entry for entry in leaves if entry.nip == nip), None)


class RecordReconciler:
    """Joins roster, punches and leave entries into today's per-person view.

    Source batches are assumed to cover the current day only and to be in
    time order, so the first IN / OUT encountered is the one shown.
    """

    def __init__(
        self,
        *,
        decision_table: Optional[StatusDecisionTable] = None,
        display_tz: Optional[tzinfo] = None,
    ):
        self._table = decision_table or StatusDecisionTable()
        self._tz = display_tz

    def reconcile(self, roster: Sequence[Person], bundle: DashboardBundle) -> list[DailyStatus]:
        return [self._daily_status(p, bundle) for p in operational_roster(roster)]

    def _daily_status(self, person: Person, bundle: DashboardBundle) -> DailyStatus:
        punches = [p for p in bundle.attendance if p.nip == person.nip]
        log_in = _first_punch(punches, PunchType.IN)
        log_out = _first_punch(punches, PunchType.OUT)
        leave = _first_leave(bundle.leaves, person.nip)

        status = self._table.decide(StatusContext(check_in=log_in, leave=leave))
        return DailyStatus(
            nip=person.nip,
            name=person.name,
            status=status,
            time_in=self._punch_time(log_in),
            time_out=self._punch_time(log_out),
            photo_url=log_in.photo if log_in else None,
        )

    def _punch_time(self, punch: Optional[AttendancePunch]) -> Optional[str]:
        # A punch without a timestamp has no time to show.
        if punch is None or not punch.timestamp:
            return None
        return format_clock(punch.timestamp, self._tz)

    def teaching_activities(self, sessions: Iterable[TeachingSession]) -> list[TeachingActivity]:
        return [
            TeachingActivity(
                activity_id=f"teach-{s.session_id}",
                name=s.name,
                subject=s.subject,
                class_name=s.class_name,
                time_range=f"{format_clock(s.start_time, self._tz)} - {format_clock(s.end_time, self._tz)}",
                end_time=s.end_time,
            )
            for s in sessions
        ]
