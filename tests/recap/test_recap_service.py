import pytest

from src.school_attendance.school_attendance.core.enums import RecapGrade
from src.school_attendance.school_attendance.dashboard.model import AttendancePunch
from src.school_attendance.school_attendance.directory.model import Person
from src.school_attendance.school_attendance.recap.service import MonthlyRecapService, grade_for


def test_recap_per_operational_person():
    roster = [
        Person(nip="001", name="A", role="Guru"),
        Person(nip="002", name="B", role="Guru"),
        Person(nip="900", name="Kepala", role="Admin"),
    ]
    attendance = [
        AttendancePunch(nip="001", type="IN", timestamp=f"2024-05-{day:02d}T07:00:00") for day in range(1, 26)
    ] + [AttendancePunch(nip="900", type="IN", timestamp="2024-05-01T07:00:00")]

    recaps = {r.nip: r for r in MonthlyRecapService().build(roster, attendance)}

    assert set(recaps) == {"001", "002"}
    assert recaps["001"].present_count == 25
    assert recaps["001"].percentage == pytest.approx(125.0)
    assert recaps["001"].grade == RecapGrade.GOOD
    assert recaps["002"].present_count == 0
    assert recaps["002"].percentage == 0
    assert recaps["002"].grade == RecapGrade.LOW


@pytest.mark.parametrize("pct, grade", [(90, RecapGrade.GOOD), (89.9, RecapGrade.WARNING), (75, RecapGrade.WARNING), (74, RecapGrade.LOW)])
def test_grade_bands(pct, grade):
    assert grade_for(pct) == grade
