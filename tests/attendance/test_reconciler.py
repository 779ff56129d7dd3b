from datetime import timezone

from src.school_attendance.school_attendance.attendance.reconciler import RecordReconciler
from src.school_attendance.school_attendance.core.enums import DailyStatusKind
from src.school_attendance.school_attendance.dashboard.model import (
    AttendancePunch,
    DashboardBundle,
    LeaveEntry,
    TeachingSession,
)
from src.school_attendance.school_attendance.directory.model import Person

GURU = Person(nip="001", name="A", role="Guru")
STAFF = Person(nip="002", name="B", role="Staff TU")
ADMIN = Person(nip="900", name="Kepala", role="Admin")
SUPER = Person(nip="901", name="Root", role="Superadmin")


def test_present_scenario():
    bundle = DashboardBundle(
        attendance=(AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T07:00:00"),),
    )

    [status] = RecordReconciler().reconcile([GURU], bundle)

    assert status.status == DailyStatusKind.PRESENT
    assert status.time_in == "07:00"
    assert status.time_out is None


def test_admin_roles_are_excluded():
    result = RecordReconciler().reconcile([GURU, ADMIN, SUPER], DashboardBundle())

    assert [s.nip for s in result] == ["001"]


def test_first_in_and_first_out_win():
    bundle = DashboardBundle(
        attendance=(
            AttendancePunch(nip="001", type="OUT", timestamp="2024-05-01T15:00:00"),
            AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T07:10:00", photo="p1.jpg"),
            AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T07:30:00", photo="p2.jpg"),
            AttendancePunch(nip="001", type="OUT", timestamp="2024-05-01T16:00:00"),
            AttendancePunch(nip="002", type="IN", timestamp="2024-05-01T06:00:00"),
        )
    )

    status = RecordReconciler().reconcile([GURU], bundle)[0]

    assert status.time_in == "07:10"
    assert status.time_out == "15:00"
    assert status.photo_url == "p1.jpg"


def test_leave_statuses():
    bundle = DashboardBundle(
        leaves=(LeaveEntry(nip="001", category="Sakit"), LeaveEntry(nip="002", category="Izin")),
    )

    result = {s.nip: s.status for s in RecordReconciler().reconcile([GURU, STAFF], bundle)}

    assert result == {"001": DailyStatusKind.SICK, "002": DailyStatusKind.EXCUSED}


def test_present_ignores_leave_and_checkout_alone_is_absent():
    bundle = DashboardBundle(
        attendance=(
            AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T07:00:00"),
            AttendancePunch(nip="002", type="OUT", timestamp="2024-05-01T12:00:00"),
        ),
        leaves=(LeaveEntry(nip="001", category="Sakit"),),
    )

    result = {s.nip: s for s in RecordReconciler().reconcile([GURU, STAFF], bundle)}

    assert result["001"].status == DailyStatusKind.PRESENT
    assert result["002"].status == DailyStatusKind.ABSENT
    assert result["002"].time_out == "12:00"


def test_no_records_is_absent():
    [status] = RecordReconciler().reconcile([GURU], DashboardBundle())

    assert status.status == DailyStatusKind.ABSENT
    assert status.time_in is None and status.time_out is None and status.photo_url is None


def test_malformed_timestamp_falls_back_to_raw_string():
    bundle = DashboardBundle(attendance=(AttendancePunch(nip="001", type="IN", timestamp="2024-13-45Tbroken"),))

    [status] = RecordReconciler().reconcile([GURU], bundle)

    assert status.status == DailyStatusKind.PRESENT
    assert status.time_in == "2024-13-45Tbroken"


def test_aware_timestamps_use_display_timezone():
    bundle = DashboardBundle(attendance=(AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T00:30:00Z"),))

    [status] = RecordReconciler(display_tz=timezone.utc).reconcile([GURU], bundle)

    assert status.time_in == "00:30"


def test_inputs_are_not_mutated():
    roster = [GURU, ADMIN]
    bundle = DashboardBundle(attendance=(AttendancePunch(nip="001", type="IN", timestamp="2024-05-01T07:00:00"),))

    RecordReconciler().reconcile(roster, bundle)

    assert roster == [GURU, ADMIN]
    assert len(bundle.attendance) == 1


def test_teaching_time_ranges():
    sessions = [
        TeachingSession("7", "A", "Matematika", "VII-A", "2024-05-01T07:30:00", "2024-05-01T09:00:00"),
        TeachingSession("8", "B", "IPA", "VIII-B", "10:00", ""),
        TeachingSession("9", "C", "IPS", "IX-C", "not-a-time", "11:00"),
    ]

    activities = RecordReconciler().teaching_activities(sessions)

    assert activities[0].activity_id == "teach-7"
    assert activities[0].time_range == "07:30 - 09:00"
    assert activities[1].time_range == "10:00 - --:--"
    assert activities[2].time_range == "not-a-time - 11:00"
    assert activities[2].end_time == "11:00"


def test_punch_without_timestamp_has_no_time():
    bundle = DashboardBundle(
        attendance=(
            AttendancePunch(nip="001", type="IN", timestamp=""),
            AttendancePunch(nip="001", type="OUT", timestamp=""),
        )
    )

    [status] = RecordReconciler().reconcile([GURU], bundle)

    assert status.status == DailyStatusKind.PRESENT
    assert status.time_in is None
    assert status.time_out is None
