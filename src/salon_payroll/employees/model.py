from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.numbers import to_float, to_int, to_optional_float
from ..core.enums import SalaryType


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên và cấu hình lương.

    ``base_salary`` is the monthly amount for FIXED, and the divisor base for
    DAILY (base_salary / work_days per present day). ``hourly_rate`` is used
    directly for HOURLY; for the other types the overtime rate is derived.
    """

    employee_id: str
    name: str
    position: str = ""
    salary_type: SalaryType = SalaryType.FIXED
    base_salary: float = 0.0
    work_days: int = 0
    shift_hours: float = 0.0
    hourly_rate: Optional[float] = None
    commission: float = 0.0
    late_penalty_per_minute: float = 0.0
    absence_penalty_per_day: float = 0.0
    custom_deductions: float = 0.0
    allowances: float = 0.0
    bonus: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        """Build from the camelCase shape used by the store and the remote API."""
        base_salary = data.get("baseSalary")
        if base_salary in (None, ""):
            base_salary = data.get("salary")
        return cls(
            employee_id=str(data.get("id") or data.get("employeeId") or ""),
            name=str(data.get("name") or "").strip(),
            position=str(data.get("position") or ""),
            salary_type=SalaryType.parse(data.get("salaryType")),
            base_salary=to_float(base_salary),
            work_days=to_int(data.get("workDays")),
            shift_hours=to_float(data.get("shiftHours")),
            hourly_rate=to_optional_float(data.get("hourlyRate")),
            commission=to_float(data.get("commission")),
            late_penalty_per_minute=to_float(data.get("latePenaltyPerMinute")),
            absence_penalty_per_day=to_float(data.get("absencePenaltyPerDay")),
            custom_deductions=to_float(data.get("customDeductions")),
            allowances=to_float(data.get("allowances")),
            bonus=to_float(data.get("bonus")),
        )
