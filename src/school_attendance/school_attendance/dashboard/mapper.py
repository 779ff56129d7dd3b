"""Adapters from the script endpoint's JSON to domain records.

The endpoint is loosely typed: fields may be missing, numeric, or null, and
whole arrays may be absent. Anything that is not an object is dropped.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .model import AttendancePunch, DashboardBundle, LeaveEntry, TeachingSession

logger = logging.getLogger(__name__)


def _opt(obj: Mapping[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = obj.get(key)
        if value is not None and value != "":
            return str(value)
    return None


def _req(obj: Mapping[str, Any], *keys: str) -> str:
    return _opt(obj, *keys) or ""


def punch_from_wire(obj: Mapping[str, Any]) -> AttendancePunch:
    return AttendancePunch(
        nip=_req(obj, "nip").strip(),
        type=_req(obj, "type").strip().upper(),
        timestamp=_req(obj, "timestamp"),
        photo=_opt(obj, "photo"),
        name=_opt(obj, "name"),
    )


def leave_from_wire(obj: Mapping[str, Any]) -> LeaveEntry:
    return LeaveEntry(
        nip=_req(obj, "nip").strip(),
        category=_req(obj, "status", "category").strip(),
        name=_opt(obj, "name"),
        reason=_opt(obj, "reason"),
    )


def teaching_from_wire(obj: Mapping[str, Any]) -> TeachingSession:
    return TeachingSession(
        session_id=_req(obj, "id"),
        name=_req(obj, "name"),
        subject=_req(obj, "subject"),
        class_name=_req(obj, "className"),
        start_time=_req(obj, "startTime"),
        end_time=_req(obj, "endTime"),
        nip=_opt(obj, "nip"),
    )


def _items(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    items = [item for item in value if isinstance(item, Mapping)]
    if len(items) != len(value):
        logger.warning("Dropped %d malformed %s items", len(value) - len(items), key)
    return items


def bundle_from_wire(payload: Any) -> DashboardBundle:
    if not isinstance(payload, Mapping):
        return DashboardBundle()
    return DashboardBundle(
        attendance=tuple(punch_from_wire(o) for o in _items(payload, "attendance")),
        teaching=tuple(teaching_from_wire(o) for o in _items(payload, "teaching")),
        leaves=tuple(leave_from_wire(o) for o in _items(payload, "leaves")),
    )
