"""In-memory doubles for the HTTP session and repositories."""

from __future__ import annotations

import json as _json

from src.school_attendance.school_attendance.core.exceptions import TransportError
from src.school_attendance.school_attendance.dashboard.model import DashboardBundle


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text if payload is None else _json.dumps(payload)

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return _json.loads(self.text)


class FakeSession:
    """Routes GET/POST by URL prefix to canned responses (or exceptions)."""

    def __init__(self, routes=None, post_error=None):
        self.routes = dict(routes or {})
        self.post_error = post_error
        self.gets = []
        self.posts = []

    def get(self, url, params=None, timeout=None, **kwargs):
        self.gets.append({"url": url, "params": params or {}, "timeout": timeout})
        outcome = self.routes[url]
        if callable(outcome):
            outcome = outcome(params or {})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def post(self, url, data=None, headers=None, timeout=None, **kwargs):
        self.posts.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.post_error:
            raise self.post_error
        return FakeResponse(status_code=200, text="")


class FakeDirectoryRepo:
    def __init__(self, rows=None, error=None):
        self._rows = rows or []
        self._error = error
        self.calls = 0

    def fetch_rows(self):
        self.calls += 1
        if self._error:
            raise self._error
        return self._rows


class FakeDashboardRepo:
    def __init__(self, bundle=None, error=None, report_rows=None, report_error=None, submit_error=None):
        self._bundle = bundle or DashboardBundle()
        self._error = error
        self._report_rows = report_rows or []
        self._report_error = report_error
        self._submit_error = submit_error
        self.last_report_args = None
        self.submitted = []

    def fetch_bundle(self):
        if self._error:
            raise self._error
        return self._bundle

    def fetch_report_rows(self, *, start, end):
        self.last_report_args = {"start": start, "end": end}
        if self._report_error:
            raise self._report_error
        return self._report_rows

    def submit(self, payload):
        if self._submit_error:
            raise self._submit_error
        self.submitted.append(payload)


def transport_error(message="down"):
    return TransportError(message)
