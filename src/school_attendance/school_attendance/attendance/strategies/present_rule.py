from __future__ import annotations

from ...core.enums import DailyStatusKind
from .base import StatusContext, StatusRule


class PresentRule(StatusRule):
    """Any check-in wins, even when a leave entry exists."""

    status = DailyStatusKind.PRESENT

    def matches(self, ctx: StatusContext) -> bool:
        return ctx.check_in is not None
