from __future__ import annotations

from datetime import date
from typing import Iterable

from .model import AttendanceEvent

SessionKey = tuple[str, date]


def distinct_sessions(events: Iterable[AttendanceEvent]) -> set[SessionKey]:
    """Every (class_id, date) for which any event was recorded.

    Duplicate entries for the same session collapse into one key.
    """
    return {e.session_key for e in events}


def attended_sessions(events: Iterable[AttendanceEvent]) -> set[SessionKey]:
    """Sessions with at least one Present event."""
    return {e.session_key for e in events if e.is_present}


def distinct_student_sessions(events: Iterable[AttendanceEvent]) -> set[tuple[str, str, date]]:
    """Every (student_id, class_id, date) with a recorded event.

    Used for snapshots that hold several students, where a session counts
    once per student rather than once per class meeting.
    """
    return {(e.student_id, *e.session_key) for e in events}


def attended_student_sessions(events: Iterable[AttendanceEvent]) -> set[tuple[str, str, date]]:
    return {(e.student_id, *e.session_key) for e in events if e.is_present}
