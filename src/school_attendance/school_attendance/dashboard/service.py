from __future__ import annotations

import math
import re
from typing import Iterable, Sequence

from ..attendance.model import DailyStatus, TeachingActivity
from ..core.enums import DailyStatusKind
from ..recap.model import MonthlyRecap
from .model import DashboardStats

_STATUS_PRIORITY = {
    DailyStatusKind.PRESENT: 0,
    DailyStatusKind.EXCUSED: 1,
    DailyStatusKind.SICK: 1,
    DailyStatusKind.ABSENT: 2,
}

STATUS_LABELS = {
    DailyStatusKind.PRESENT: "Hadir",
    DailyStatusKind.EXCUSED: "Izin",
    DailyStatusKind.SICK: "Sakit",
    DailyStatusKind.ABSENT: "Belum Hadir",
}


def _sort_key(item: DailyStatus):
    priority = _STATUS_PRIORITY.get(item.status, 2)
    if item.status == DailyStatusKind.PRESENT:
        return (priority, item.time_in or "", "")
    return (priority, "", item.name.casefold())


def filter_and_sort(items: Iterable[DailyStatus], query: str = "") -> list[DailyStatus]:
    """Search by name (case-insensitive) or NIP, present staff first by arrival."""
    q = (query or "").strip()
    needle = q.lower()
    matched = [i for i in items if needle in i.name.lower() or q in i.nip]
    return sorted(matched, key=_sort_key)


def compute_stats(
    daily: Sequence[DailyStatus],
    teaching: Sequence[TeachingActivity],
    recaps: Sequence[MonthlyRecap],
) -> DashboardStats:
    avg = 0
    if recaps:
        avg = int(math.floor(sum(r.percentage for r in recaps) / len(recaps) + 0.5))
    return DashboardStats(
        total=len(daily),
        present=sum(1 for d in daily if d.status == DailyStatusKind.PRESENT),
        teaching=len(teaching),
        avg_percentage=avg,
    )


def initials(name: str) -> str:
    """Avatar initials: first letters of first and last word, or two letters of a single word."""
    parts = re.sub(r"[^a-zA-Z ]", "", name or "").split()
    if not parts:
        return "U"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()
