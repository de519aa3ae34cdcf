from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_calendar_day(value) -> date:
    """Turn a stored date value into a calendar day.

    Accepts ``date``, ``datetime`` (its own calendar day, no timezone
    conversion) and ISO strings optionally followed by a time part
    (``2024-05-01T08:00:00Z`` or ``2024-05-01 08:00:00``).

    Raises ValueError/TypeError for anything else.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10 and text[10] in ("T", " "):
            text = text[:10]
        return parse_iso_date(text)
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def month_key(day: date) -> tuple[int, int]:
    return day.year, day.month


def month_label(key: tuple[int, int], *, with_year: bool = False) -> str:
    first = date(key[0], key[1], 1)
    return first.strftime("%b %Y") if with_year else first.strftime("%b")
