from __future__ import annotations

import json
import logging
import time
from datetime import date
from typing import Any, Mapping, Optional, Sequence

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import MalformedPayloadError, TransportError
from .mapper import bundle_from_wire
from .model import DashboardBundle

logger = logging.getLogger(__name__)


def _cache_buster() -> int:
    return int(time.time() * 1000)


class ScriptDashboardRepository:
    """Talks to the spreadsheet's web-app script (GET for reads, POST for submissions)."""

    def __init__(
        self,
        *,
        script_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self._url = script_url
        self._session = session or requests.Session()
        self._timeout = timeout

    def _get_json(self, params: dict) -> Any:
        try:
            resp = self._session.get(self._url, params=params, timeout=self._timeout, allow_redirects=True)
        except requests.RequestException as exc:
            raise TransportError(f"{params.get('action')} request failed: {exc}") from exc

        if not resp.ok:
            raise TransportError(f"{params.get('action')} returned HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedPayloadError(f"{params.get('action')} returned invalid JSON") from exc

    def fetch_bundle(self) -> DashboardBundle:
        payload = self._get_json({"action": "GET_DASHBOARD_DATA", "t": _cache_buster()})
        if not isinstance(payload, dict):
            raise MalformedPayloadError("Dashboard payload is not an object")
        return bundle_from_wire(payload)

    def fetch_report_rows(self, *, start: date, end: date) -> Sequence[Mapping[str, Any]]:
        payload = self._get_json(
            {
                "action": "GET_REPORT",
                "start": start.isoformat(),
                "end": end.isoformat(),
                "t": _cache_buster(),
            }
        )
        if not isinstance(payload, list):
            raise MalformedPayloadError("Report payload is not a list")
        return [row for row in payload if isinstance(row, dict)]

    def submit(self, payload: Mapping[str, Any]) -> None:
        try:
            self._session.post(
                self._url,
                data=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "text/plain;charset=utf-8"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Submission failed: {exc}") from exc
        # The response is not inspected: the script accepts and answers opaquely.
        logger.info("Submitted %s for %s", payload.get("action"), payload.get("user", {}).get("nip"))
