from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import PayslipSourceError
from ..employees.model import Employee
from ..sales.repository import SaleRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .client import PayrollApiClient
from .model import PayPeriod, Payslip

logger = logging.getLogger(__name__)


class PayslipSource(ABC):
    """Where a payslip comes from (Strategy Pattern: remote backend or local calculation)."""

    @abstractmethod
    def get_payslip(self, employee: Employee, period: PayPeriod) -> Payslip:
        raise NotImplementedError


class LocalPayslipSource(PayslipSource):
    def __init__(
        self,
        attendance: AttendanceRepository,
        sales: SaleRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        work_start_time: Optional[str] = None,
    ):
        self._attendance = attendance
        self._sales = sales
        self._calculator = calculator or StandardPayrollCalculator()
        self._work_start_time = work_start_time

    def get_payslip(self, employee: Employee, period: PayPeriod) -> Payslip:
        return self._calculator.calculate(
            employee,
            period=period,
            attendance=self._attendance.list_for_employee(employee.employee_id),
            sales=self._sales.list_all(),
            work_start_time=self._work_start_time,
        )


class RemotePayslipSource(PayslipSource):
    def __init__(self, client: PayrollApiClient):
        self._client = client

    def get_payslip(self, employee: Employee, period: PayPeriod) -> Payslip:
        data = self._client.get_employee_payslip(employee.employee_id, period)
        return Payslip.from_dict(data, employee_id=employee.employee_id, period=period)


class FallbackPayslipSource(PayslipSource):
    """Try ``primary``; when it fails for an employee, use ``fallback`` for that employee only."""

    def __init__(self, primary: PayslipSource, fallback: PayslipSource):
        self._primary = primary
        self._fallback = fallback

    def get_payslip(self, employee: Employee, period: PayPeriod) -> Payslip:
        try:
            return self._primary.get_payslip(employee, period)
        except PayslipSourceError as e:
            logger.warning(
                "remote payslip unavailable for %s (%s), using local calculation: %s",
                employee.employee_id,
                period.label(),
                e,
            )
            return self._fallback.get_payslip(employee, period)
