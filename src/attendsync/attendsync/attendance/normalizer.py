"""Map loosely-typed attendance documents onto ``AttendanceEvent``.

Documents come either from the document store (camelCase keys) or from the
MySQL repository (snake_case columns). Malformed rows are skipped and logged,
never raised: one bad document must not hide a whole dashboard.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import coerce_calendar_day
from ..core.constants import CLASS_PLACEHOLDER_ID_CHARS, CLASS_PLACEHOLDER_PREFIX
from ..core.enums import AttendanceStatus
from .model import AttendanceEvent

logger = logging.getLogger(__name__)

_FIELD_ALIASES = {
    "record_id": ("id", "record_id", "attendance_id"),
    "student_id": ("studentId", "student_id"),
    "student_name": ("studentName", "student_name"),
    "class_id": ("classId", "class_id"),
    "class_name": ("className", "class_name"),
    "faculty_id": ("facultyId", "faculty_id"),
    "date": ("date", "session_date"),
    "status": ("status",),
}


def _pick(raw: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def placeholder_class_name(class_id: str) -> str:
    return f"{CLASS_PLACEHOLDER_PREFIX}{class_id[:CLASS_PLACEHOLDER_ID_CHARS]}"


def normalize_event(raw: Mapping[str, Any]) -> Optional[AttendanceEvent]:
    """Return an event, or None when the document cannot be used."""

    if not isinstance(raw, Mapping):
        logger.warning("Skipping attendance record of type %s", type(raw).__name__)
        return None

    class_id = _pick(raw, "class_id")
    raw_date = _pick(raw, "date")
    record_id = _optional_str(_pick(raw, "record_id"))
    if class_id is None or raw_date is None:
        logger.warning("Skipping attendance record %s: missing classId or date", record_id or "<no id>")
        return None

    try:
        day = coerce_calendar_day(raw_date)
    except (TypeError, ValueError):
        logger.warning("Skipping attendance record %s: unparseable date %r", record_id or "<no id>", raw_date)
        return None

    status = AttendanceStatus.parse(_pick(raw, "status"))
    if status is None:
        logger.warning("Skipping attendance record %s: unknown status %r", record_id or "<no id>", raw.get("status"))
        return None

    class_id = str(class_id)
    class_name = _pick(raw, "class_name")
    return AttendanceEvent(
        student_id=str(_pick(raw, "student_id") or ""),
        class_id=class_id,
        class_name=str(class_name) if class_name is not None else placeholder_class_name(class_id),
        date=day,
        status=status,
        record_id=record_id,
        student_name=_optional_str(_pick(raw, "student_name")),
        faculty_id=_optional_str(_pick(raw, "faculty_id")),
    )


def normalize_events(raws: Iterable[Mapping[str, Any]]) -> list[AttendanceEvent]:
    events: list[AttendanceEvent] = []
    for raw in raws:
        event = normalize_event(raw)
        if event is not None:
            events.append(event)
    return events
