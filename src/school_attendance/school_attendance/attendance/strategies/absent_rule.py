from __future__ import annotations

from ...core.enums import DailyStatusKind
from .base import StatusContext, StatusRule


class AbsentRule(StatusRule):
    """Catch-all: nothing on record yet."""

    status = DailyStatusKind.ABSENT

    def matches(self, ctx: StatusContext) -> bool:
        return True
