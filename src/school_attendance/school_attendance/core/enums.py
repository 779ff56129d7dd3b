from __future__ import annotations

from enum import Enum


class DailyStatusKind(str, Enum):
    """Trạng thái trong ngày của một nhân sự, suy ra sau mỗi lần làm mới."""

    PRESENT = "PRESENT"
    EXCUSED = "EXCUSED"
    SICK = "SICK"
    ABSENT = "ABSENT"


class PunchType(str, Enum):
    IN = "IN"
    OUT = "OUT"


class SubmissionAction(str, Enum):
    """Loại dữ liệu gửi lên máy chủ script."""

    ATTENDANCE = "ATTENDANCE"
    TEACHING = "TEACHING"
    LEAVE = "LEAVE"


class RecapGrade(str, Enum):
    GOOD = "GOOD"
    WARNING = "WARNING"
    LOW = "LOW"
