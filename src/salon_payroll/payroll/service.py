from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.constants import CURRENCY_SUFFIX
from ..core.exceptions import NotFoundError, PayslipSourceError
from ..employees.repository import EmployeeRepository
from .model import PayPeriod, Payslip
from .sources import PayslipSource

logger = logging.getLogger(__name__)


def format_money(value: float) -> str:
    return f"{value:.2f} {CURRENCY_SUFFIX}"


@dataclass(frozen=True)
class PayrollReport:
    period: PayPeriod
    rows: list[dict]
    payslips: list[Payslip]
    totals: dict
    negative_net: list[str]
    # Employees whose payslip could not be obtained; they have no row.
    missing: list[str]


class PayrollReportService:
    def __init__(self, employees: EmployeeRepository, source: PayslipSource):
        self._employees = employees
        self._source = source

    def get_employee_payslip(self, employee_id: str, period: PayPeriod) -> Payslip:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Nhân viên không tồn tại")
        return self._source.get_payslip(employee, period)

    def build_payroll_report(self, period: PayPeriod, *, employee_id: Optional[str] = None) -> PayrollReport:
        employees = self._employees.list_all()
        if employee_id is not None:
            employees = [e for e in employees if e.employee_id == employee_id]

        rows: list[dict] = []
        payslips: list[Payslip] = []
        negative_net: list[str] = []
        missing: list[str] = []
        totals = {
            "base_salary": 0.0,
            "commission": 0.0,
            "overtime_pay": 0.0,
            "total_deductions": 0.0,
            "net_salary": 0.0,
        }

        for e in employees:
            try:
                p = self._source.get_payslip(e, period)
            except PayslipSourceError as ex:
                logger.error("payslip for %s (%s) unavailable: %s", e.employee_id, period.label(), ex)
                missing.append(e.employee_id)
                continue
            payslips.append(p)
            if p.net_salary < 0:
                negative_net.append(e.employee_id)

            rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "position": e.position or "-",
                    "salary_type": e.salary_type.value,
                    "present_days": p.present_days,
                    "absent_days": p.absent_days,
                    "base_salary": format_money(p.base_salary),
                    "commission": format_money(p.commission),
                    "overtime_pay": format_money(p.overtime_pay),
                    "total_deductions": format_money(p.total_deductions),
                    "net_salary": format_money(p.net_salary),
                }
            )

            totals["base_salary"] += p.base_salary
            totals["commission"] += p.commission
            totals["overtime_pay"] += p.overtime_pay
            totals["total_deductions"] += p.total_deductions
            totals["net_salary"] += p.net_salary

        return PayrollReport(
            period=period,
            rows=rows,
            payslips=payslips,
            totals={k: format_money(v) for k, v in totals.items()},
            negative_net=negative_net,
            missing=missing,
        )
