from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from .model import AttendanceEvent, SubjectStat

SUBJECT_FIELDS = ["class_id", "subject", "attended_sessions", "total_sessions", "percentage"]
LOG_FIELDS = ["date", "class_id", "class_name", "student_id", "status"]


def _to_csv_bytes(fieldnames: list[str], rows: Iterable[dict]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    # BOM so spreadsheet apps pick up UTF-8 class names
    return out.getvalue().encode("utf-8-sig")


def subject_stats_csv(stats: Sequence[SubjectStat]) -> bytes:
    return _to_csv_bytes(SUBJECT_FIELDS, (s.to_dict() for s in stats))


def attendance_log_csv(events: Sequence[AttendanceEvent]) -> bytes:
    return _to_csv_bytes(
        LOG_FIELDS,
        (
            {
                "date": e.date.strftime("%Y-%m-%d"),
                "class_id": e.class_id,
                "class_name": e.class_name,
                "student_id": e.student_id,
                "status": e.status.value,
            }
            for e in events
        ),
    )
