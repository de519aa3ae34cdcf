from attendsync.attendance import aggregator
from attendsync.attendance.export import attendance_log_csv, subject_stats_csv
from attendsync.attendance.normalizer import normalize_events


def test_subject_csv_has_header_and_bom(make_raw):
    events = normalize_events([make_raw(className="Física"), make_raw(date="2024-05-02", status="Absent")])

    body = subject_stats_csv(aggregator.subject_stats(events))

    assert body.startswith(b"\xef\xbb\xbf")
    lines = body.decode("utf-8-sig").splitlines()
    assert lines[0] == "class_id,subject,attended_sessions,total_sessions,percentage"
    assert lines[1] == "C1,Física,1,2,50.0"


def test_log_csv_rows(make_raw):
    events = normalize_events([make_raw(className="Art", student_id="s7")])

    lines = attendance_log_csv(events).decode("utf-8-sig").splitlines()

    assert lines == ["date,class_id,class_name,student_id,status", "2024-05-01,C1,Art,s7,Present"]
