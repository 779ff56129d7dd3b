from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Protocol, Sequence

from .model import DashboardBundle


class DashboardRepository(Protocol):
    """Giao diện nguồn dữ liệu dashboard (web app script).

    Lưu ý: lỗi truyền tải/phản hồi hỏng được ném ra dưới dạng SourceError; tầng loader quyết định fallback.
    """

    def fetch_bundle(self) -> DashboardBundle:
        raise NotImplementedError

    def fetch_report_rows(self, *, start: date, end: date) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError

    def submit(self, payload: Mapping[str, Any]) -> None:
        """Fire-and-forget POST; only local network errors are observable."""

        raise NotImplementedError
