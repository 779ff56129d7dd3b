from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional

from ...common.datetime_utils import day_key
from ...core.constants import STANDARD_WORKING_DAYS
from ...core.enums import PunchType
from ...dashboard.model import AttendancePunch
from .base import RecapCalculator


class StandardRecapCalculator(RecapCalculator):
    """Standard rule: distinct IN days / fixed working days * 100, not clamped."""

    def __init__(self, working_days: int = STANDARD_WORKING_DAYS, *, display_tz: Optional[tzinfo] = None):
        if working_days <= 0:
            raise ValueError("working_days must be positive")
        self.working_days = int(working_days)
        self._tz = display_tz

    def present_days(self, punches: Iterable[AttendancePunch]) -> int:
        days = {day_key(p.timestamp, self._tz) for p in punches if p.type == PunchType.IN.value}
        days.discard(None)
        return len(days)

    def percentage(self, present_days: int) -> float:
        return present_days / self.working_days * 100
