from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RecapGrade


@dataclass(frozen=True)
class MonthlyRecap:
    """Read-model: tổng hợp chuyên cần theo tháng của một nhân sự."""

    nip: str
    name: str
    present_count: int
    percentage: float
    grade: RecapGrade
