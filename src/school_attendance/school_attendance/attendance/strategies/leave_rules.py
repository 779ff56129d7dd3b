from __future__ import annotations

from ...core.constants import SICK_LEAVE_CATEGORIES
from ...core.enums import DailyStatusKind
from .base import StatusContext, StatusRule


class SickLeaveRule(StatusRule):
    status = DailyStatusKind.SICK

    def matches(self, ctx: StatusContext) -> bool:
        return ctx.leave is not None and ctx.leave.category in SICK_LEAVE_CATEGORIES


class ExcusedLeaveRule(StatusRule):
    """Leave with any other category (Izin, Dinas Luar, ...)."""

    status = DailyStatusKind.EXCUSED

    def matches(self, ctx: StatusContext) -> bool:
        return ctx.leave is not None
