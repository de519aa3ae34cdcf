from __future__ import annotations

from typing import Mapping, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import AttendanceRepository, RawAttendanceRow

_SELECT_EVENTS = """
    SELECT e.record_id, e.student_id, e.student_name, e.class_id,
           COALESCE(c.class_name, e.class_name) AS class_name,
           e.faculty_id, e.session_date, e.status
    FROM attendance_events e
    LEFT JOIN classes c ON c.class_id = e.class_id
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str = "", params: tuple = ()) -> Sequence[RawAttendanceRow]:
        sql = _SELECT_EVENTS + (f" WHERE {where}" if where else "") + " ORDER BY e.session_date, e.record_id"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def list_for_student(self, student_id: str) -> Sequence[RawAttendanceRow]:
        return self._select("e.student_id=%s", (student_id,))

    def list_for_class(self, class_id: str) -> Sequence[RawAttendanceRow]:
        return self._select("e.class_id=%s", (class_id,))

    def list_for_faculty(self, faculty_id: str) -> Sequence[RawAttendanceRow]:
        return self._select("e.faculty_id=%s", (faculty_id,))

    def list_all(self) -> Sequence[RawAttendanceRow]:
        return self._select()

    def list_classes(self) -> Mapping[str, str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT class_id, class_name FROM classes ORDER BY class_name")
            return {str(r["class_id"]): str(r["class_name"]) for r in fetchall(cur)}
