from __future__ import annotations

import logging
from datetime import date, datetime

from attendsync.attendance.normalizer import normalize_event, normalize_events
from attendsync.core.enums import AttendanceStatus


def test_normalizes_document_fields(make_raw):
    event = normalize_event(make_raw(className="Computer Science 101", id="2024-05-01_s1", studentName="Ana"))

    assert event.class_id == "C1"
    assert event.class_name == "Computer Science 101"
    assert event.date == date(2024, 5, 1)
    assert event.status == AttendanceStatus.PRESENT
    assert event.student_id == "s1"
    assert event.record_id == "2024-05-01_s1"
    assert event.student_name == "Ana"


def test_missing_class_name_defaults_to_truncated_class_id(make_raw):
    event = normalize_event(make_raw(class_id="abcdefghijkl"))

    assert event.class_name == "Class abcdef"


def test_missing_date_is_dropped_and_logged(make_raw, caplog):
    doc = make_raw()
    del doc["date"]

    with caplog.at_level(logging.WARNING):
        events = normalize_events([doc, make_raw(date="2024-05-02")])

    assert [e.date for e in events] == [date(2024, 5, 2)]
    assert "missing classId or date" in caplog.text


def test_missing_class_id_is_dropped(make_raw):
    doc = make_raw()
    doc["classId"] = ""

    assert normalize_event(doc) is None


def test_unparseable_date_and_unknown_status_are_dropped(make_raw):
    docs = [make_raw(date="05/01/2024"), make_raw(status="Late"), make_raw(status=None)]

    assert normalize_events(docs) == []


def test_accepts_timestamps_and_mysql_rows():
    by_string = normalize_event({"classId": "C1", "date": "2024-05-01T23:30:00Z", "status": "present"})
    by_row = normalize_event(
        {"class_id": "C1", "class_name": "Math", "session_date": datetime(2024, 5, 1, 9, 0), "status": "Absent"}
    )

    assert by_string.date == date(2024, 5, 1)
    assert by_string.status == AttendanceStatus.PRESENT
    assert by_row.date == date(2024, 5, 1)
    assert by_row.class_name == "Math"
    assert by_row.status == AttendanceStatus.ABSENT


def test_non_mapping_input_is_skipped():
    assert normalize_events([None, "C1,2024-05-01,Present"]) == []


def test_accepts_a_lazy_sequence(make_raw):
    events = normalize_events(make_raw(date=f"2024-05-0{d}") for d in range(1, 4))

    assert len(events) == 3
