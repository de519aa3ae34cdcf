from attendsync.attendance.model import ClassAttendance, StudentStat, SubjectStat
from attendsync.attendance.ranker import at_risk_students, lowest_attendance_subject, top_classes


def _subject(label, pct):
    return SubjectStat(class_id=label, subject_label=label, attended_sessions=0, total_sessions=1, percentage=pct)


def test_lowest_subject_first_wins_on_ties():
    stats = [_subject("Art", 90.0), _subject("Math", 60.0), _subject("Physics", 60.0)]

    lowest = lowest_attendance_subject(stats)

    assert lowest.subject == "Math"
    assert lowest.percentage == 60.0


def test_lowest_subject_sentinel_for_empty_input():
    assert lowest_attendance_subject([]).to_dict() == {"subject": "N/A", "percentage": 0}


def test_top_classes_descending_and_limited():
    classes = [ClassAttendance(class_id=str(i), name=f"C{i}", attendance=pct) for i, pct in enumerate([70, 95, 80, 95, 10, 60])]

    top = top_classes(classes, limit=3)

    assert [c.name for c in top] == ["C1", "C3", "C2"]


def test_at_risk_students_below_threshold_lowest_first():
    stats = [
        StudentStat(student_id="s1", student_name="A", attended_sessions=9, total_sessions=10, percentage=90.0),
        StudentStat(student_id="s2", student_name="B", attended_sessions=5, total_sessions=10, percentage=50.0),
        StudentStat(student_id="s3", student_name="C", attended_sessions=7, total_sessions=10, percentage=70.0),
        StudentStat(student_id="s4", student_name="D", attended_sessions=0, total_sessions=0, percentage=0.0),
    ]

    assert [s.student_id for s in at_risk_students(stats, threshold=75.0)] == ["s2", "s3"]
