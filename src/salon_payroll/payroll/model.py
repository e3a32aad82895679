from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.numbers import to_float, to_int
from ..common.validators import require_int_in_range


@dataclass(frozen=True)
class PayPeriod:
    """Calendar month of a payslip (month is 1-12)."""

    month: int
    year: int

    @classmethod
    def parse(cls, month: Any, year: Any) -> "PayPeriod":
        return cls(
            month=require_int_in_range(month, "Tháng", low=1, high=12),
            year=require_int_in_range(year, "Năm", low=1900, high=9999),
        )

    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class AdvanceDetail:
    date: str
    amount: float


@dataclass(frozen=True)
class Payslip:
    """Read-model: phiếu lương của một nhân viên trong một tháng (không lưu trữ).

    The dict form (``to_dict``) is the same shape the remote payroll endpoint
    returns, so a remote and a locally computed payslip are interchangeable.
    """

    employee_id: str
    month: int
    year: int

    present_days: int = 0
    late_days: int = 0
    absent_days: int = 0
    leave_days: int = 0
    total_work_hours: float = 0.0
    overtime_hours: float = 0.0
    total_late_minutes: int = 0

    base_salary: float = 0.0
    commission: float = 0.0
    overtime_pay: float = 0.0
    total_sales_amount: float = 0.0

    late_deduction: float = 0.0
    absent_deduction: float = 0.0
    custom_deductions: float = 0.0
    advances: float = 0.0
    advance_details: tuple[AdvanceDetail, ...] = field(default_factory=tuple)

    total_earnings: float = 0.0
    total_deductions: float = 0.0
    net_salary: float = 0.0

    salary_note: str = ""
    allowances: float = 0.0
    bonus: float = 0.0

    def to_dict(self) -> dict:
        """Remote field names, but ``month`` stays 1-based (January = 1).

        Only :class:`PayrollApiClient` speaks the backend's 0-based month;
        remote payloads are parsed with an explicit ``period`` for that reason.
        """
        return {
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "baseSalary": self.base_salary,
            "commission": self.commission,
            "overtimePay": self.overtime_pay,
            "totalEarnings": self.total_earnings,
            "totalDeductions": self.total_deductions,
            "netSalary": self.net_salary,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "lateDays": self.late_days,
            "leaveDays": self.leave_days,
            "totalWorkHours": self.total_work_hours,
            "overtimeHours": self.overtime_hours,
            "totalLateMinutes": self.total_late_minutes,
            "salaryNote": self.salary_note,
            "lateDeduction": self.late_deduction,
            "absentDeduction": self.absent_deduction,
            "customDeductions": self.custom_deductions,
            "advances": self.advances,
            "totalSalesAmount": self.total_sales_amount,
            "advanceDetails": [{"date": a.date, "amount": a.amount} for a in self.advance_details],
            "allowances": self.allowances,
            "bonus": self.bonus,
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        employee_id: Optional[str] = None,
        period: Optional[PayPeriod] = None,
    ) -> "Payslip":
        """Parse a payslip dict (e.g. a remote response). Missing numbers become 0.

        ``employee_id`` and ``period`` override what the payload says, because
        the caller knows what it asked for.
        """
        details = data.get("advanceDetails") or []
        return cls(
            employee_id=str(employee_id if employee_id is not None else data.get("employeeId") or ""),
            month=period.month if period else to_int(data.get("month")),
            year=period.year if period else to_int(data.get("year")),
            present_days=to_int(data.get("presentDays")),
            late_days=to_int(data.get("lateDays")),
            absent_days=to_int(data.get("absentDays")),
            leave_days=to_int(data.get("leaveDays")),
            total_work_hours=to_float(data.get("totalWorkHours")),
            overtime_hours=to_float(data.get("overtimeHours")),
            total_late_minutes=to_int(data.get("totalLateMinutes")),
            base_salary=to_float(data.get("baseSalary")),
            commission=to_float(data.get("commission")),
            overtime_pay=to_float(data.get("overtimePay")),
            total_sales_amount=to_float(data.get("totalSalesAmount")),
            late_deduction=to_float(data.get("lateDeduction")),
            absent_deduction=to_float(data.get("absentDeduction")),
            custom_deductions=to_float(data.get("customDeductions")),
            advances=to_float(data.get("advances")),
            advance_details=tuple(
                AdvanceDetail(date=str(d.get("date") or ""), amount=to_float(d.get("amount")))
                for d in details
                if isinstance(d, Mapping)
            ),
            total_earnings=to_float(data.get("totalEarnings")),
            total_deductions=to_float(data.get("totalDeductions")),
            net_salary=to_float(data.get("netSalary")),
            salary_note=str(data.get("salaryNote") or ""),
            allowances=to_float(data.get("allowances")),
            bonus=to_float(data.get("bonus")),
        )
