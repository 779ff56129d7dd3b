from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_range(start: str, end: str) -> tuple[date, date]:
    """Validate a pair of YYYY-MM-DD strings and return them as dates."""
    try:
        start_date = parse_iso_date(require_non_empty(start, "start"))
        end_date = parse_iso_date(require_non_empty(end, "end"))
    except ValueError as exc:
        raise ValidationError("Dates must use the YYYY-MM-DD format") from exc
    if start_date > end_date:
        raise ValidationError("start must not be after end")
    return start_date, end_date
