from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT, HTML_DOCUMENT_MARKER
from ..core.exceptions import MalformedPayloadError, TransportError
from .csv_parser import parse_csv

logger = logging.getLogger(__name__)


class SheetDirectoryRepository:
    """Reads the roster from a published spreadsheet CSV through a CORS proxy."""

    def __init__(
        self,
        *,
        sheet_csv_url: str,
        proxy_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self._sheet_csv_url = sheet_csv_url
        self._proxy_url = proxy_url
        self._session = session or requests.Session()
        self._timeout = timeout

    def _fetch_text(self) -> str:
        params = {"url": self._sheet_csv_url, "timestamp": int(time.time() * 1000)}
        try:
            resp = self._session.get(self._proxy_url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Roster request failed: {exc}") from exc

        if not resp.ok:
            raise TransportError(f"Roster request returned HTTP {resp.status_code}")
        return resp.text

    def fetch_rows(self) -> Sequence[dict[str, str]]:
        text = self._fetch_text()
        if not text or text.strip().lower().startswith(HTML_DOCUMENT_MARKER):
            raise MalformedPayloadError("Roster response is not CSV")
        rows = parse_csv(text)
        logger.debug("Fetched %d roster rows", len(rows))
        return rows
