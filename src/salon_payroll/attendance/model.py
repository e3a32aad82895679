from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.numbers import to_float, to_int, to_optional_float
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày.

    Read-only for payroll. Duplicate (employee_id, work_date) records are not
    merged here and are counted twice.
    """

    record_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    work_hours: Optional[float] = None
    late_minutes: Optional[int] = None
    advance: float = 0.0
    notes: Optional[str] = None

    def __post_init__(self):
        # Stored labels ("متأخر", "تأخير", ...) become one AttendanceStatus.
        object.__setattr__(self, "status", AttendanceStatus.normalize(self.status))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["AttendanceRecord"]:
        """Build from the stored shape; returns None when the date is unusable."""
        work_date = coerce_date(data.get("date"))
        if work_date is None:
            return None

        late = data.get("lateMinutes")
        return cls(
            record_id=str(data.get("id") or ""),
            employee_id=str(data.get("employeeId") or ""),
            work_date=work_date,
            status=data.get("status"),
            check_in=_optional_text(data.get("checkIn")),
            check_out=_optional_text(data.get("checkOut")),
            work_hours=to_optional_float(data.get("workHours")),
            late_minutes=None if late in (None, "") else to_int(late),
            advance=to_float(data.get("advance")),
            notes=_optional_text(data.get("notes")),
        )


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
