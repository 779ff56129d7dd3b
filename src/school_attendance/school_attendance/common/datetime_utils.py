from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional

from ..core.constants import TIME_PLACEHOLDER


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_timestamp(value: Optional[str], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the script endpoint.

    Aware timestamps are converted to ``tz`` when given; naive ones are kept
    as wall-clock time. Returns None for empty or unparseable input.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if tz is not None and parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(tz)
        except (OverflowError, ValueError):
            return None
    return parsed


def format_clock(value: Optional[str], tz: Optional[tzinfo] = None) -> str:
    """Format a timestamp as HH:MM (24h).

    Values that do not look like a date (no ``T`` and no ``-``, e.g. ``07:30``)
    are already presentable and returned verbatim; unparseable timestamps are
    returned raw as well.
    """
    if not value:
        return TIME_PLACEHOLDER
    if "T" not in value and "-" not in value:
        return value
    parsed = parse_timestamp(value, tz)
    if parsed is None:
        return value
    return parsed.strftime("%H:%M")


def day_key(value: Optional[str], tz: Optional[tzinfo] = None) -> Optional[date]:
    """Calendar day of a timestamp, or None when it cannot be parsed."""
    parsed = parse_timestamp(value, tz)
    return parsed.date() if parsed else None
