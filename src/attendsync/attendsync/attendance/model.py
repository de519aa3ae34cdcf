from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import NO_SUBJECT_LABEL
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one attendance row per (student, class, date)."""

    student_id: str
    class_id: str
    class_name: str
    date: date
    status: AttendanceStatus
    record_id: Optional[str] = None
    student_name: Optional[str] = None
    faculty_id: Optional[str] = None

    @property
    def session_key(self) -> tuple[str, date]:
        return self.class_id, self.date

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT


@dataclass(frozen=True)
class SubjectStat:
    class_id: str
    subject_label: str
    attended_sessions: int
    total_sessions: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "class_id": self.class_id,
            "subject": self.subject_label,
            "attended_sessions": self.attended_sessions,
            "total_sessions": self.total_sessions,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class MonthlyStat:
    year: int
    month: int
    month_label: str
    attended_sessions: int
    total_sessions: int
    percentage: float

    def as_chart_point(self) -> dict:
        """Shape consumed by the trend line chart."""
        return {"date": self.month_label, "attendance": self.percentage}


@dataclass(frozen=True)
class LowestSubject:
    subject: str = NO_SUBJECT_LABEL
    percentage: float = 0

    def to_dict(self) -> dict:
        return {"subject": self.subject, "percentage": self.percentage}


@dataclass(frozen=True)
class AttendanceSummary:
    overall_percentage: float
    total_attended: int
    total_classes: int
    lowest_attendance_subject: LowestSubject

    def to_dict(self) -> dict:
        return {
            "overall_percentage": self.overall_percentage,
            "total_attended": self.total_attended,
            "total_classes": self.total_classes,
            "lowest_attendance_subject": self.lowest_attendance_subject.to_dict(),
        }


@dataclass(frozen=True)
class DailyStat:
    """Faculty view: distinct students present vs. recorded on one day."""

    date: date
    present: int
    total: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "present": self.present,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class ClassAttendance:
    """Admin view: share of Present events among all events of a class."""

    class_id: str
    name: str
    attendance: float

    def to_dict(self) -> dict:
        return {"class_id": self.class_id, "name": self.name, "attendance": self.attendance}


@dataclass(frozen=True)
class StudentStat:
    student_id: str
    student_name: str
    attended_sessions: int
    total_sessions: int
    percentage: float
    class_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "student_name": self.student_name,
            "attended_sessions": self.attended_sessions,
            "total_sessions": self.total_sessions,
            "percentage": self.percentage,
            "class_id": self.class_id,
        }
