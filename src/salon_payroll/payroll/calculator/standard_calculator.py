from __future__ import annotations

from typing import Iterable, Optional

from .base import PayrollCalculator
from ...attendance.aggregator import display_work_hours, late_minutes
from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import in_period
from ...common.numbers import safe_div
from ...core.constants import CURRENCY_SUFFIX, OVERTIME_MULTIPLIER
from ...core.enums import AttendanceStatus, SalaryType
from ...employees.model import Employee
from ...sales.model import SaleRecord
from ..model import AdvanceDetail, PayPeriod, Payslip


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule set of the salon.

    earnings   = base (by salary type) + sales commission + overtime x 1.5
    deductions = late minutes x penalty + absent days x penalty
                 + custom deductions + cash advances
    net        = earnings - deductions (may be negative, never clamped)
    """

    def calculate(
        self,
        employee: Employee,
        *,
        period: PayPeriod,
        attendance: Iterable[AttendanceRecord],
        sales: Iterable[SaleRecord],
        work_start_time: Optional[str] = None,
    ) -> Payslip:
        records = [
            r
            for r in attendance
            if r.employee_id == employee.employee_id and in_period(r.work_date, month=period.month, year=period.year)
        ]

        present_days = sum(1 for r in records if r.status.counts_as_present)
        late_days = sum(1 for r in records if r.status == AttendanceStatus.LATE)
        absent_days = sum(1 for r in records if r.status == AttendanceStatus.ABSENT)
        leave_days = sum(1 for r in records if r.status == AttendanceStatus.LEAVE)

        total_work_hours = 0.0
        overtime_hours = 0.0
        for r in records:
            hours = display_work_hours(r)
            if hours is None:
                continue
            total_work_hours += hours
            if hours > employee.shift_hours:
                overtime_hours += hours - employee.shift_hours

        total_late_minutes = sum(
            late_minutes(r, work_start_time) for r in records if r.status == AttendanceStatus.LATE
        )

        total_sales_amount = 0.0
        commission = 0.0
        if employee.commission > 0:
            total_sales_amount = sum(s.amount for s in sales if self._is_attributed(s, employee, period))
            commission = total_sales_amount * employee.commission / 100

        base_salary, salary_note = self._base_salary(
            employee, present_days=present_days, total_work_hours=total_work_hours
        )

        overtime_pay = overtime_hours * self.overtime_rate(employee) * OVERTIME_MULTIPLIER

        late_deduction = total_late_minutes * employee.late_penalty_per_minute
        absent_deduction = absent_days * employee.absence_penalty_per_day
        advances = sum(r.advance for r in records)
        advance_details = tuple(
            AdvanceDetail(date=r.work_date.isoformat(), amount=r.advance) for r in records if r.advance > 0
        )

        total_earnings = base_salary + commission + overtime_pay
        total_deductions = late_deduction + absent_deduction + employee.custom_deductions + advances

        return Payslip(
            employee_id=employee.employee_id,
            month=period.month,
            year=period.year,
            present_days=present_days,
            late_days=late_days,
            absent_days=absent_days,
            leave_days=leave_days,
            total_work_hours=total_work_hours,
            overtime_hours=overtime_hours,
            total_late_minutes=total_late_minutes,
            base_salary=base_salary,
            commission=commission,
            overtime_pay=overtime_pay,
            total_sales_amount=total_sales_amount,
            late_deduction=late_deduction,
            absent_deduction=absent_deduction,
            custom_deductions=employee.custom_deductions,
            advances=advances,
            advance_details=advance_details,
            total_earnings=total_earnings,
            total_deductions=total_deductions,
            net_salary=total_earnings - total_deductions,
            salary_note=salary_note,
            allowances=employee.allowances,
            bonus=employee.bonus,
        )

    @staticmethod
    def overtime_rate(employee: Employee) -> float:
        """Hourly rate overtime is paid on (before the 1.5 multiplier)."""
        if employee.salary_type == SalaryType.HOURLY:
            return employee.hourly_rate or 0.0
        return safe_div(employee.base_salary, employee.work_days * employee.shift_hours)

    @staticmethod
    def _is_attributed(sale: SaleRecord, employee: Employee, period: PayPeriod) -> bool:
        if not in_period(sale.sale_date, month=period.month, year=period.year):
            return False
        # Older sales only know the specialist's display name.
        if sale.specialist_id:
            return sale.specialist_id == employee.employee_id
        return sale.specialist == employee.name

    @staticmethod
    def _base_salary(employee: Employee, *, present_days: int, total_work_hours: float) -> tuple[float, str]:
        if employee.salary_type == SalaryType.DAILY:
            base = safe_div(employee.base_salary, employee.work_days) * present_days
            note = (
                f"راتب يومي: {_plain(employee.base_salary)} ÷ {employee.work_days} يوم"
                f" × {present_days} يوم حضور"
            )
            return base, note

        if employee.salary_type == SalaryType.HOURLY:
            rate = employee.hourly_rate or 0.0
            note = f"راتب بالساعة: {_plain(rate)} {CURRENCY_SUFFIX} × {total_work_hours:.2f} ساعة"
            return rate * total_work_hours, note

        return employee.base_salary, "راتب شهري ثابت"


def _plain(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
