from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import DailyStatusKind
from ...dashboard.model import AttendancePunch, LeaveEntry


@dataclass(frozen=True)
class StatusContext:
    """What one person has on record today. Check-out is deliberately absent."""

    check_in: Optional[AttendancePunch]
    leave: Optional[LeaveEntry]


class StatusRule(ABC):
    """Strategy Pattern: one row of the daily status decision table."""

    status: DailyStatusKind

    @abstractmethod
    def matches(self, ctx: StatusContext) -> bool:
        raise NotImplementedError
