"""Attendance rollups used by the student, faculty and admin dashboards.

Every function here is a pure transformation of an in-memory snapshot of
normalized events. Percentages are session based: a session is one
``(class_id, date)`` pair, counted once however many entries reference it.
Empty input always yields zero-valued results.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_key, month_label
from ..core.constants import PERCENT_DECIMALS
from .model import (
    AttendanceEvent,
    AttendanceSummary,
    ClassAttendance,
    DailyStat,
    MonthlyStat,
    StudentStat,
    SubjectStat,
)
from .ranker import lowest_attendance_subject
from .sessions import (
    attended_sessions,
    attended_student_sessions,
    distinct_sessions,
    distinct_student_sessions,
)


def percentage(attended: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(attended / total * 100, PERCENT_DECIMALS)


def _session_counts(events: Sequence[AttendanceEvent], per_student: bool) -> tuple[int, int]:
    if per_student:
        return len(attended_student_sessions(events)), len(distinct_student_sessions(events))
    return len(attended_sessions(events)), len(distinct_sessions(events))


def _group_by(events: Iterable[AttendanceEvent], key) -> dict:
    # dict keeps first-encountered order of the groups
    groups: dict = {}
    for e in events:
        groups.setdefault(key(e), []).append(e)
    return groups


def subject_stats(events: Sequence[AttendanceEvent], *, per_student: bool = False) -> list[SubjectStat]:
    """One entry per class.

    ``per_student`` is for class, faculty or school snapshots: each student's
    sessions are counted separately instead of one session per class meeting.
    """

    stats: list[SubjectStat] = []
    for class_id, group in _group_by(events, lambda e: e.class_id).items():
        attended, total = _session_counts(group, per_student)
        stats.append(
            SubjectStat(
                class_id=class_id,
                subject_label=group[0].class_name,
                attended_sessions=attended,
                total_sessions=total,
                percentage=percentage(attended, total),
            )
        )
    return stats


def monthly_stats(events: Sequence[AttendanceEvent], *, per_student: bool = False) -> list[MonthlyStat]:
    buckets = _group_by(events, lambda e: month_key(e.date))
    with_year = len({year for year, _ in buckets}) > 1

    stats: list[MonthlyStat] = []
    for key in sorted(buckets):
        group = buckets[key]
        attended, total = _session_counts(group, per_student)
        stats.append(
            MonthlyStat(
                year=key[0],
                month=key[1],
                month_label=month_label(key, with_year=with_year),
                attended_sessions=attended,
                total_sessions=total,
                percentage=percentage(attended, total),
            )
        )
    return stats


def summarize_subjects(stats: Sequence[SubjectStat]) -> AttendanceSummary:
    """Session-weighted overall figure, not the mean of subject percentages."""

    total_attended = sum(s.attended_sessions for s in stats)
    total_classes = sum(s.total_sessions for s in stats)
    return AttendanceSummary(
        overall_percentage=percentage(total_attended, total_classes),
        total_attended=total_attended,
        total_classes=total_classes,
        lowest_attendance_subject=lowest_attendance_subject(stats),
    )


def summarize(events: Sequence[AttendanceEvent], *, per_student: bool = False) -> AttendanceSummary:
    return summarize_subjects(subject_stats(events, per_student=per_student))


def daily_stats(events: Sequence[AttendanceEvent]) -> list[DailyStat]:
    present: dict[date, set[str]] = defaultdict(set)
    recorded: dict[date, set[str]] = defaultdict(set)
    for e in events:
        recorded[e.date].add(e.student_id)
        if e.is_present:
            present[e.date].add(e.student_id)

    return [
        DailyStat(
            date=day,
            present=len(present[day]),
            total=len(recorded[day]),
            percentage=percentage(len(present[day]), len(recorded[day])),
        )
        for day in sorted(recorded)
    ]


def average_daily_attendance(events: Sequence[AttendanceEvent]) -> float:
    """Mean of the per-day ratios over days that have at least one record."""

    days = [d for d in daily_stats(events) if d.total > 0]
    if not days:
        return 0.0
    mean = sum(d.present / d.total for d in days) / len(days)
    return round(mean * 100, PERCENT_DECIMALS)


def class_attendance(
    events: Sequence[AttendanceEvent],
    classes: Optional[Mapping[str, str]] = None,
) -> list[ClassAttendance]:
    """Per-class share of Present entries.

    ``classes`` maps class_id to display name; classes listed there but
    without any entry are reported at 0.
    """

    entries: dict[str, dict[tuple[str, date], bool]] = {}
    names: dict[str, str] = dict(classes or {})
    for e in events:
        per_class = entries.setdefault(e.class_id, {})
        key = (e.student_id, e.date)
        per_class[key] = per_class.get(key, False) or e.is_present
        names.setdefault(e.class_id, e.class_name)

    out: list[ClassAttendance] = []
    for class_id, name in names.items():
        per_class = entries.get(class_id, {})
        attended = sum(1 for present in per_class.values() if present)
        out.append(ClassAttendance(class_id=class_id, name=name, attendance=percentage(attended, len(per_class))))
    return out


def student_stats(events: Sequence[AttendanceEvent]) -> list[StudentStat]:
    stats: list[StudentStat] = []
    for student_id, group in _group_by(events, lambda e: e.student_id).items():
        attended = len(attended_sessions(group))
        total = len(distinct_sessions(group))
        name = next((e.student_name for e in group if e.student_name), None) or student_id
        class_ids = {e.class_id for e in group}
        stats.append(
            StudentStat(
                student_id=student_id,
                student_name=name,
                attended_sessions=attended,
                total_sessions=total,
                percentage=percentage(attended, total),
                class_id=next(iter(class_ids)) if len(class_ids) == 1 else None,
            )
        )
    return stats


def attendance_log(events: Sequence[AttendanceEvent]) -> list[AttendanceEvent]:
    """Newest day first, then class name A to Z."""

    by_name = sorted(events, key=lambda e: e.class_name)
    return sorted(by_name, key=lambda e: e.date, reverse=True)


def overall_attendance(events: Sequence[AttendanceEvent]) -> float:
    """Share of (student, class, date) entries marked Present, duplicates collapsed."""

    attended, total = _session_counts(events, per_student=True)
    return percentage(attended, total)
