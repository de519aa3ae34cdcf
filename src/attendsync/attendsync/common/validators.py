from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_choice(value, choices, field_name: str):
    """Coerce ``value`` into one of the ``choices`` enum members."""

    try:
        return choices(value)
    except ValueError:
        allowed = ", ".join(c.value for c in choices)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
