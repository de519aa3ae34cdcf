"""Example: use the aggregation core directly (no Flask, no database).

Controllers are a thin layer; the attendance rollups are plain functions over
an in-memory snapshot of attendance documents.
"""

from attendsync.attendance import aggregator
from attendsync.attendance.normalizer import normalize_events


def main():
    raw = [
        {"classId": "CS101", "className": "Computer Science 101", "date": "2024-05-01", "status": "Present"},
        {"classId": "CS101", "className": "Computer Science 101", "date": "2024-05-02", "status": "Absent"},
        {"classId": "MATH203", "className": "Advanced Mathematics", "date": "2024-06-03", "status": "Present"},
        {"classId": "MATH203", "date": "not-a-date", "status": "Present"},
    ]
    events = normalize_events(raw)
    for stat in aggregator.subject_stats(events):
        print(stat.to_dict())
    print([m.as_chart_point() for m in aggregator.monthly_stats(events)])
    print(aggregator.summarize(events).to_dict())


if __name__ == "__main__":
    main()
