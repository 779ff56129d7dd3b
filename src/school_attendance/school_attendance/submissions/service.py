from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_non_empty
from ..core.enums import SubmissionAction
from ..core.exceptions import TransportError, ValidationError
from ..dashboard.repository import DashboardRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submitter:
    name: str
    nip: str
    role: str


class SubmissionService:
    """Use case: send attendance / teaching / leave data to the script.

    Delivery is fire-and-forget. A True result means the request left this
    process; whether the script accepted it cannot be observed.
    """

    def __init__(self, dashboard: DashboardRepository):
        self._dashboard = dashboard

    @staticmethod
    def build_payload(action: str, user: Submitter, data: Any) -> dict:
        try:
            kind = SubmissionAction(str(action).upper())
        except ValueError as exc:
            raise ValidationError(f"Unknown submission action: {action}") from exc
        nip = require_non_empty(user.nip, "nip")
        return {
            "action": kind.value,
            "user": {"name": user.name, "nip": nip, "role": user.role},
            "data": data,
        }

    def submit(self, action: str, user: Submitter, data: Any) -> bool:
        payload = self.build_payload(action, user, data)
        try:
            self._dashboard.submit(payload)
        except TransportError as exc:
            logger.error("Submission of %s failed: %s", payload["action"], exc)
            return False
        return True


def submitter_from_json(obj: Mapping[str, Any]) -> Submitter:
    return Submitter(
        name=str(obj.get("name") or ""),
        nip=str(obj.get("nip") or ""),
        role=str(obj.get("role") or ""),
    )
