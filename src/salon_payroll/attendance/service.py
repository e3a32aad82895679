from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from .aggregator import display_work_hours, format_hours_for_display, format_time_12h, late_minutes
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, work_start_time: Optional[str] = None):
        self._attendance = attendance
        self._work_start_time = work_start_time

    def list_ui(self, *, employee_id: Optional[str] = None, work_date: Optional[date] = None) -> list[dict]:
        rows = self._attendance.query(employee_id=employee_id, work_date=work_date)
        return [self._to_ui(r) for r in rows]

    def _to_ui(self, r: AttendanceRecord) -> dict:
        status = r.status
        css = {
            AttendanceStatus.PRESENT: "bg-success",
            AttendanceStatus.LATE: "bg-warning text-dark",
            AttendanceStatus.ABSENT: "bg-danger",
            AttendanceStatus.LEAVE: "bg-info",
            AttendanceStatus.UNKNOWN: "bg-secondary",
        }.get(status, "bg-secondary")

        return {
            "id": r.record_id,
            "employeeId": r.employee_id,
            "date": r.work_date.isoformat(),
            "status": status.value,
            "checkIn": format_time_12h(r.check_in),
            "checkOut": format_time_12h(r.check_out),
            "workHours": format_hours_for_display(display_work_hours(r)),
            "lateMinutes": late_minutes(r, self._work_start_time),
            "advance": r.advance,
            "cssClass": css,
        }
