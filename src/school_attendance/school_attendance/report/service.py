from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from ..common.validators import require_date_range
from ..core.exceptions import ReportUnavailableError, SourceError
from ..dashboard.repository import DashboardRepository

logger = logging.getLogger(__name__)

CSV_MIMETYPE = "text/csv;charset=utf-8"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ReportFile:
    filename: str
    mimetype: str
    content: bytes


def rows_to_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    """Header = keys of the first row; every value wrapped in double quotes.

    Values are not escaped: the export rows are flat and quote-free in practice.
    """
    headers = list(rows[0].keys())
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(f'"{_cell(row.get(h))}"' for h in headers))
    return "\n".join(lines)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


class ReportExportService:
    def __init__(self, dashboard: DashboardRepository):
        self._dashboard = dashboard

    def _fetch(self, start: str, end: str):
        start_date, end_date = require_date_range(start, end)
        try:
            rows = self._dashboard.fetch_report_rows(start=start_date, end=end_date)
        except SourceError as exc:
            logger.error("Report download failed for %s..%s: %s", start, end, exc)
            raise ReportUnavailableError("Report download failed") from exc
        return start_date, end_date, rows

    def build_csv(self, start: str, end: str) -> Optional[ReportFile]:
        """Return None when the range has no rows (nothing to download)."""
        start_date, end_date, rows = self._fetch(start, end)
        if not rows:
            return None
        return ReportFile(
            filename=f"Laporan_Absensi_{start_date.isoformat()}_{end_date.isoformat()}.csv",
            mimetype=CSV_MIMETYPE,
            content=rows_to_csv(rows).encode("utf-8"),
        )

    def build_xlsx(self, start: str, end: str) -> Optional[ReportFile]:
        start_date, end_date, rows = self._fetch(start, end)
        if not rows:
            return None

        df = pd.DataFrame(list(rows), columns=list(rows[0].keys()))
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Laporan")
        return ReportFile(
            filename=f"Laporan_Absensi_{start_date.isoformat()}_{end_date.isoformat()}.xlsx",
            mimetype=XLSX_MIMETYPE,
            content=output.getvalue(),
        )
