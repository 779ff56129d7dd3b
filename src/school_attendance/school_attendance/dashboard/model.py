from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..attendance.model import DailyStatus, TeachingActivity
from ..recap.model import MonthlyRecap


@dataclass(frozen=True)
class AttendancePunch:
    """Thực thể miền (domain): một lần chấm công vào/ra."""

    nip: str
    type: str
    timestamp: str
    photo: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class LeaveEntry:
    """Thực thể miền (domain): đơn nghỉ trong ngày (Sakit / Izin ...)."""

    nip: str
    category: str
    name: Optional[str] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class TeachingSession:
    session_id: str
    name: str
    subject: str
    class_name: str
    start_time: str
    end_time: str
    nip: Optional[str] = None


@dataclass(frozen=True)
class DashboardBundle:
    attendance: tuple[AttendancePunch, ...] = ()
    teaching: tuple[TeachingSession, ...] = ()
    leaves: tuple[LeaveEntry, ...] = ()


@dataclass(frozen=True)
class DashboardStats:
    total: int = 0
    present: int = 0
    teaching: int = 0
    avg_percentage: int = 0


@dataclass(frozen=True)
class DashboardSnapshot:
    """Read-model published by the loader; replaced wholesale on every refresh."""

    daily: tuple[DailyStatus, ...] = ()
    teaching: tuple[TeachingActivity, ...] = ()
    recaps: tuple[MonthlyRecap, ...] = ()
    stats: DashboardStats = field(default_factory=DashboardStats)
    refreshed_at: Optional[datetime] = None
