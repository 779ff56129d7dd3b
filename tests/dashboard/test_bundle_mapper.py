from src.school_attendance.school_attendance.dashboard.mapper import bundle_from_wire


def test_absent_or_null_arrays_become_empty():
    bundle = bundle_from_wire({"attendance": None, "teaching": "oops"})

    assert bundle.attendance == ()
    assert bundle.teaching == ()
    assert bundle.leaves == ()


def test_non_object_payload_is_empty_bundle():
    assert bundle_from_wire([1, 2, 3]).attendance == ()


def test_wire_fields_are_coerced_and_non_objects_dropped():
    bundle = bundle_from_wire(
        {
            "attendance": [{"nip": 1985, "type": "in", "timestamp": "2024-05-01T07:00:00", "photo": ""}, "junk"],
            "leaves": [{"nip": "002", "status": "Sakit", "name": "B"}],
            "teaching": [
                {"id": 3, "name": "A", "subject": "IPA", "className": "VII-A", "startTime": "07:00", "endTime": None}
            ],
        }
    )

    [punch] = bundle.attendance
    assert punch.nip == "1985"
    assert punch.type == "IN"
    assert punch.photo is None

    assert bundle.leaves[0].category == "Sakit"

    [session] = bundle.teaching
    assert session.session_id == "3"
    assert session.class_name == "VII-A"
    assert session.end_time == ""
