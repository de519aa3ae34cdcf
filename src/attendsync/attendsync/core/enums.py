from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Per-student-per-session status as stored in the attendance documents."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus | None":
        if isinstance(value, AttendanceStatus):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class AnalysisType(str, Enum):
    CLASS = "class"
    STUDENT = "student"
    FACULTY = "faculty"


class ReportFormat(str, Enum):
    PDF = "PDF"
    EXCEL = "Excel"


class VisualizationType(str, Enum):
    BAR = "bar"
    PIE = "pie"
    LINE = "line"
