from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DailyStatusKind


@dataclass(frozen=True)
class DailyStatus:
    """Read-model: trạng thái trong ngày của một nhân sự (tính lại mỗi lần làm mới)."""

    nip: str
    name: str
    status: DailyStatusKind
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class TeachingActivity:
    activity_id: str
    name: str
    subject: str
    class_name: str
    time_range: str
    end_time: str
