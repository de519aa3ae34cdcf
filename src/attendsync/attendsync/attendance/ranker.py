from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_AT_RISK_THRESHOLD, DEFAULT_TOP_CLASSES
from .model import ClassAttendance, LowestSubject, StudentStat, SubjectStat


def lowest_attendance_subject(stats: Sequence[SubjectStat]) -> LowestSubject:
    """Subject with the minimum percentage; the first one wins on ties."""

    if not stats:
        return LowestSubject()
    lowest = sorted(stats, key=lambda s: s.percentage)[0]
    return LowestSubject(subject=lowest.subject_label, percentage=lowest.percentage)


def top_classes(classes: Sequence[ClassAttendance], *, limit: int = DEFAULT_TOP_CLASSES) -> list[ClassAttendance]:
    return sorted(classes, key=lambda c: c.attendance, reverse=True)[: max(int(limit), 0)]


def at_risk_students(
    stats: Sequence[StudentStat],
    *,
    threshold: float = DEFAULT_AT_RISK_THRESHOLD,
) -> list[StudentStat]:
    """Students below ``threshold`` percent, lowest first."""

    below = [s for s in stats if s.total_sessions > 0 and s.percentage < threshold]
    return sorted(below, key=lambda s: s.percentage)
