from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_AT_RISK_THRESHOLD, DEFAULT_TOP_CLASSES
from . import aggregator
from .model import (
    AttendanceEvent,
    AttendanceSummary,
    ClassAttendance,
    DailyStat,
    MonthlyStat,
    StudentStat,
    SubjectStat,
)
from .normalizer import normalize_events
from .ranker import at_risk_students, top_classes
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _event_to_log_row(e: AttendanceEvent) -> dict:
    return {
        "date": e.date.strftime("%Y-%m-%d"),
        "class_id": e.class_id,
        "class_name": e.class_name,
        "status": e.status.value,
    }


@dataclass(frozen=True)
class StudentDashboard:
    student_id: str
    subjects: list[SubjectStat]
    monthly: list[MonthlyStat]
    summary: AttendanceSummary
    log: list[AttendanceEvent]

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "enrolled_classes": len(self.subjects),
            "subjects": [s.to_dict() for s in self.subjects],
            "monthly": [m.as_chart_point() for m in self.monthly],
            "summary": self.summary.to_dict(),
            "log": [_event_to_log_row(e) for e in self.log],
        }


@dataclass(frozen=True)
class FacultyDashboard:
    faculty_id: str
    class_count: int
    avg_attendance: float
    daily: list[DailyStat]
    at_risk: list[StudentStat]

    def to_dict(self) -> dict:
        return {
            "faculty_id": self.faculty_id,
            "class_count": self.class_count,
            "avg_attendance": self.avg_attendance,
            "daily": [d.to_dict() for d in self.daily],
            "at_risk": [s.to_dict() for s in self.at_risk],
        }


@dataclass(frozen=True)
class ClassReport:
    class_id: str
    students: list[StudentStat]
    at_risk: list[StudentStat]
    monthly: list[MonthlyStat]

    def to_dict(self) -> dict:
        return {
            "class_id": self.class_id,
            "students": [s.to_dict() for s in self.students],
            "at_risk": [s.to_dict() for s in self.at_risk],
            "monthly": [m.as_chart_point() for m in self.monthly],
        }


@dataclass(frozen=True)
class AdminOverview:
    avg_attendance: float
    total_classes: int
    top_classes: list[ClassAttendance]
    monthly: list[MonthlyStat]

    def to_dict(self) -> dict:
        return {
            "avg_attendance": self.avg_attendance,
            "total_classes": self.total_classes,
            "top_classes": [c.to_dict() for c in self.top_classes],
            "monthly": [m.as_chart_point() for m in self.monthly],
        }


class AttendanceAnalyticsService:
    """Composes the pure aggregation core over repository snapshots."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        at_risk_threshold: float = DEFAULT_AT_RISK_THRESHOLD,
        top_class_limit: int = DEFAULT_TOP_CLASSES,
    ):
        self._attendance = attendance
        self._threshold = float(at_risk_threshold)
        self._top_limit = int(top_class_limit)

    def student_events(self, student_id: str) -> list[AttendanceEvent]:
        return normalize_events(self._attendance.list_for_student(require_non_empty(student_id, "student_id")))

    def class_events(self, class_id: str) -> list[AttendanceEvent]:
        return normalize_events(self._attendance.list_for_class(require_non_empty(class_id, "class_id")))

    def faculty_events(self, faculty_id: str) -> list[AttendanceEvent]:
        return normalize_events(self._attendance.list_for_faculty(require_non_empty(faculty_id, "faculty_id")))

    def student_dashboard(self, student_id: str) -> StudentDashboard:
        events = self.student_events(student_id)
        student_id = student_id.strip()
        subjects = aggregator.subject_stats(events)
        logger.debug("student %s: %d events over %d subjects", student_id, len(events), len(subjects))
        return StudentDashboard(
            student_id=student_id,
            subjects=subjects,
            monthly=aggregator.monthly_stats(events),
            summary=aggregator.summarize_subjects(subjects),
            log=aggregator.attendance_log(events),
        )

    def faculty_dashboard(self, faculty_id: str) -> FacultyDashboard:
        events = self.faculty_events(faculty_id)
        faculty_id = faculty_id.strip()
        students = self._per_student_per_class(events)
        return FacultyDashboard(
            faculty_id=faculty_id,
            class_count=len({e.class_id for e in events}),
            avg_attendance=aggregator.average_daily_attendance(events),
            daily=aggregator.daily_stats(events),
            at_risk=at_risk_students(students, threshold=self._threshold),
        )

    def class_report(self, class_id: str) -> ClassReport:
        events = self.class_events(class_id)
        class_id = class_id.strip()
        students = aggregator.student_stats(events)
        return ClassReport(
            class_id=class_id,
            students=students,
            at_risk=at_risk_students(students, threshold=self._threshold),
            monthly=aggregator.monthly_stats(events, per_student=True),
        )

    def admin_overview(self) -> AdminOverview:
        events = normalize_events(self._attendance.list_all())
        classes = aggregator.class_attendance(events, self._attendance.list_classes())
        return AdminOverview(
            avg_attendance=aggregator.overall_attendance(events),
            total_classes=len(classes),
            top_classes=top_classes(classes, limit=self._top_limit),
            monthly=aggregator.monthly_stats(events, per_student=True),
        )

    @staticmethod
    def _per_student_per_class(events: Sequence[AttendanceEvent]) -> list[StudentStat]:
        # Faculty rosters span several classes; a student is at risk per class.
        by_class: dict[str, list[AttendanceEvent]] = {}
        for e in events:
            by_class.setdefault(e.class_id, []).append(e)
        out: list[StudentStat] = []
        for group in by_class.values():
            out.extend(aggregator.student_stats(group))
        return out
