from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...dashboard.model import AttendancePunch


class RecapCalculator(ABC):
    """Calculator interface (Strategy Pattern for monthly recap)."""

    @abstractmethod
    def present_days(self, punches: Iterable[AttendancePunch]) -> int:
        raise NotImplementedError

    @abstractmethod
    def percentage(self, present_days: int) -> float:
        raise NotImplementedError
