from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from zoneinfo import ZoneInfo

import requests

from .attendance.reconciler import RecordReconciler
from .core import constants
from .dashboard.loader import DashboardLoader
from .dashboard.scheduler import RefreshScheduler
from .dashboard.script_repository import ScriptDashboardRepository
from .directory.sheet_repository import SheetDirectoryRepository
from .recap.calculator.standard_calculator import StandardRecapCalculator
from .recap.service import MonthlyRecapService
from .report.service import ReportExportService
from .submissions.service import SubmissionService


@dataclass(frozen=True)
class Container:
    directory_repo: SheetDirectoryRepository
    dashboard_repo: ScriptDashboardRepository

    loader: DashboardLoader
    scheduler: RefreshScheduler
    report_service: ReportExportService
    submission_service: SubmissionService


def build_container(settings: Any, *, session: Optional[requests.Session] = None) -> Container:
    timeout = float(getattr(settings, "HTTP_TIMEOUT", constants.DEFAULT_HTTP_TIMEOUT))
    tz_name = getattr(settings, "DISPLAY_TIMEZONE", None)
    display_tz = ZoneInfo(tz_name) if tz_name else None
    session = session or requests.Session()

    directory_repo = SheetDirectoryRepository(
        sheet_csv_url=settings.SHEET_CSV_URL,
        proxy_url=settings.CSV_PROXY_URL,
        session=session,
        timeout=timeout,
    )
    dashboard_repo = ScriptDashboardRepository(script_url=settings.SCRIPT_URL, session=session, timeout=timeout)

    calculator = StandardRecapCalculator(
        int(getattr(settings, "STANDARD_WORKING_DAYS", constants.STANDARD_WORKING_DAYS)),
        display_tz=display_tz,
    )
    loader = DashboardLoader(
        directory_repo,
        dashboard_repo,
        reconciler=RecordReconciler(display_tz=display_tz),
        recap_service=MonthlyRecapService(calculator=calculator),
    )
    scheduler = RefreshScheduler(
        loader.refresh,
        interval_seconds=float(
            getattr(settings, "REFRESH_INTERVAL_SECONDS", constants.DEFAULT_REFRESH_INTERVAL_SECONDS)
        ),
    )

    return Container(
        directory_repo=directory_repo,
        dashboard_repo=dashboard_repo,
        loader=loader,
        scheduler=scheduler,
        report_service=ReportExportService(dashboard_repo),
        submission_service=SubmissionService(dashboard_repo),
    )
