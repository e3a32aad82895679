from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_NOTIFICATION_INTERVAL_SECONDS
from .data.mock_store import InMemoryAttendance, InMemoryEmployees, InMemorySales, MockStore, load_mock_store
from .notifications.service import LoggingNotifier, NotificationMonitor
from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.client import PayrollApiClient
from .payroll.service import PayrollReportService
from .payroll.sources import FallbackPayslipSource, LocalPayslipSource, PayslipSource, RemotePayslipSource


@dataclass(frozen=True)
class Container:
    store: MockStore

    employees_repo: InMemoryEmployees
    attendance_repo: InMemoryAttendance
    sales_repo: InMemorySales

    calculator: PayrollCalculator
    payslip_source: PayslipSource
    api_client: Optional[PayrollApiClient]
    payroll_report_service: PayrollReportService

    notifier: LoggingNotifier
    notification_monitor: NotificationMonitor

    work_start_time: Optional[str]


def build_container(*, settings: Any, store: Optional[MockStore] = None) -> Container:
    store = store or load_mock_store(getattr(settings, "MOCK_DATA_PATH", None))
    work_start_time = getattr(settings, "WORK_START_TIME", None) or None

    calculator = StandardPayrollCalculator()
    local_source = LocalPayslipSource(
        store.attendance,
        store.sales,
        calculator=calculator,
        work_start_time=work_start_time,
    )

    api_client = None
    payslip_source: PayslipSource = local_source
    if getattr(settings, "USE_BACKEND", False) and getattr(settings, "BACKEND_URL", ""):
        api_client = PayrollApiClient(
            settings.BACKEND_URL,
            timeout=getattr(settings, "API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT_SECONDS),
            token=getattr(settings, "API_TOKEN", None),
        )
        payslip_source = RemotePayslipSource(api_client)
        if getattr(settings, "AUTO_FALLBACK_TO_MOCK", True):
            payslip_source = FallbackPayslipSource(payslip_source, local_source)

    payroll_report_service = PayrollReportService(store.employees, payslip_source)

    notifier = LoggingNotifier()
    notification_monitor = NotificationMonitor(
        notifier,
        appointments_provider=lambda: store.appointments,
        shifts_provider=lambda: store.cashier_shifts,
        interval_seconds=getattr(settings, "NOTIFICATION_INTERVAL_SECONDS", DEFAULT_NOTIFICATION_INTERVAL_SECONDS),
    )

    return Container(
        store=store,
        employees_repo=store.employees,
        attendance_repo=store.attendance,
        sales_repo=store.sales,
        calculator=calculator,
        payslip_source=payslip_source,
        api_client=api_client,
        payroll_report_service=payroll_report_service,
        notifier=notifier,
        notification_monitor=notification_monitor,
        work_start_time=work_start_time,
    )
