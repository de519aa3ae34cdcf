from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

RawAttendanceRow = Mapping[str, Any]


class AttendanceRepository(Protocol):
    """Read side of the attendance store.

    Implementations return raw rows; normalization happens in the service so
    every backend goes through the same validation.
    """

    def list_for_student(self, student_id: str) -> Sequence[RawAttendanceRow]:
        raise NotImplementedError

    def list_for_class(self, class_id: str) -> Sequence[RawAttendanceRow]:
        raise NotImplementedError

    def list_for_faculty(self, faculty_id: str) -> Sequence[RawAttendanceRow]:
        raise NotImplementedError

    def list_all(self) -> Sequence[RawAttendanceRow]:
        raise NotImplementedError

    def list_classes(self) -> Mapping[str, str]:
        """class_id -> display name for every known class."""

        raise NotImplementedError
