from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee
from ...sales.model import SaleRecord
from ..model import PayPeriod, Payslip


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations receive the unfiltered attendance and sales collections
    and select the employee's records for the period themselves, so every
    caller filters the same way.
    """

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        *,
        period: PayPeriod,
        attendance: Iterable[AttendanceRecord],
        sales: Iterable[SaleRecord],
        work_start_time: Optional[str] = None,
    ) -> Payslip:
        raise NotImplementedError
