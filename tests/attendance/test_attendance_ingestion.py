from datetime import date

import pytest

from src.salon_payroll.attendance.model import AttendanceRecord
from src.salon_payroll.core.enums import AttendanceStatus, SalaryType
from src.salon_payroll.employees.model import Employee


@pytest.mark.parametrize("raw", ["تأخير", "متأخر", "late", "delay", " Late "])
def test_late_spellings_normalize_to_one_status(raw):
    assert AttendanceStatus.normalize(raw) == AttendanceStatus.LATE


def test_unknown_status_is_not_counted_as_present():
    status = AttendanceStatus.normalize("??")
    assert status == AttendanceStatus.UNKNOWN
    assert not status.counts_as_present
    assert AttendanceStatus.LATE.counts_as_present


def test_record_from_dict_coerces_without_raising():
    r = AttendanceRecord.from_dict(
        {
            "id": 7,
            "employeeId": 2,
            "date": "2026-01-05T00:00:00.000Z",
            "status": "متأخر",
            "checkIn": " 09:30 ",
            "checkOut": "",
            "workHours": "abc",
            "lateMinutes": "",
            "advance": "not a number",
        }
    )
    assert r is not None
    assert r.record_id == "7"
    assert r.employee_id == "2"
    assert r.work_date == date(2026, 1, 5)
    assert r.status == AttendanceStatus.LATE
    assert r.check_in == "09:30"
    assert r.check_out is None
    assert r.work_hours is None
    assert r.late_minutes is None
    assert r.advance == 0.0


def test_record_from_dict_without_date_is_skipped():
    assert AttendanceRecord.from_dict({"id": "x", "employeeId": "1", "status": "حاضر"}) is None


def test_employee_from_dict_salary_type_and_defaults():
    e = Employee.from_dict({"id": "5", "name": "منى", "salaryType": "بالساعة", "hourlyRate": "50", "salary": 1000})
    assert e.salary_type == SalaryType.HOURLY
    assert e.hourly_rate == 50.0
    assert e.base_salary == 1000.0
    assert e.work_days == 0

    default = Employee.from_dict({"id": "6", "name": "x"})
    assert default.salary_type == SalaryType.FIXED
    assert default.hourly_rate is None
