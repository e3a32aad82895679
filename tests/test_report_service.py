from __future__ import annotations

import csv
import io
from datetime import date

import pytest

from src.salon_payroll.attendance.model import AttendanceRecord
from src.salon_payroll.core.enums import AttendanceStatus, SalaryType
from src.salon_payroll.core.exceptions import NotFoundError, PayslipSourceError
from src.salon_payroll.data.mock_store import InMemoryAttendance, InMemoryEmployees, InMemorySales
from src.salon_payroll.employees.model import Employee
from src.salon_payroll.payroll.export import report_to_csv
from src.salon_payroll.payroll.model import PayPeriod
from src.salon_payroll.payroll.service import PayrollReportService, format_money
from src.salon_payroll.payroll.sources import LocalPayslipSource, PayslipSource

JAN = PayPeriod(month=1, year=2026)


def _service(employees, attendance=()):
    source = LocalPayslipSource(InMemoryAttendance(attendance), InMemorySales(), work_start_time="09:00")
    return PayrollReportService(InMemoryEmployees(employees), source)


def test_format_money_has_currency_suffix():
    assert format_money(1234.5) == "1234.50 ج.م"
    assert format_money(-40) == "-40.00 ج.م"


def test_report_rows_totals_and_negative_net():
    employees = [
        Employee(employee_id="1", name="سارة", position="خبيرة", base_salary=5000),
        Employee(employee_id="2", name="منى", salary_type=SalaryType.FIXED, base_salary=100, custom_deductions=300),
    ]
    attendance = [
        AttendanceRecord(record_id="a", employee_id="1", work_date=date(2026, 1, 2), status=AttendanceStatus.PRESENT),
    ]

    report = _service(employees, attendance).build_payroll_report(JAN)

    assert [r["employee_id"] for r in report.rows] == ["1", "2"]
    assert report.rows[0]["net_salary"] == "5000.00 ج.م"
    assert report.rows[0]["present_days"] == 1
    assert report.rows[1]["position"] == "-"
    assert report.rows[1]["net_salary"] == "-200.00 ج.م"
    assert report.totals["net_salary"] == "4800.00 ج.م"
    assert report.negative_net == ["2"]
    assert len(report.payslips) == 2


def test_report_can_be_limited_to_one_employee():
    employees = [Employee(employee_id="1", name="a"), Employee(employee_id="2", name="b")]
    report = _service(employees).build_payroll_report(JAN, employee_id="2")

    assert [r["employee_id"] for r in report.rows] == ["2"]


def test_unknown_employee_payslip_raises_not_found():
    with pytest.raises(NotFoundError):
        _service([]).get_employee_payslip("404", JAN)


def test_csv_export_has_header_and_one_line_per_employee():
    employees = [Employee(employee_id="1", name="سارة", base_salary=5000), Employee(employee_id="2", name="منى")]
    report = _service(employees).build_payroll_report(JAN)

    body = report_to_csv(report)

    assert body.startswith(b"\xef\xbb\xbf")
    rows = list(csv.reader(io.StringIO(body.decode("utf-8-sig"))))
    assert rows[0] == ["الموظف", "الوظيفة", "الراتب", "العمولة", "الإضافي", "الخصومات", "الصافي"]
    assert len(rows) == 3
    assert rows[1][0] == "سارة"
    assert rows[1][-1] == "5000.00 ج.م"


class UnreachableForSome(PayslipSource):
    def __init__(self, local, failing_ids):
        self.local = local
        self.failing_ids = set(failing_ids)

    def get_payslip(self, employee, period):
        if employee.employee_id in self.failing_ids:
            raise PayslipSourceError("backend down")
        return self.local.get_payslip(employee, period)


def test_one_failing_payslip_does_not_abort_the_report():
    employees = [
        Employee(employee_id="1", name="سارة", base_salary=5000),
        Employee(employee_id="2", name="منى", base_salary=3000),
        Employee(employee_id="3", name="ريم", base_salary=1000),
    ]
    local = LocalPayslipSource(InMemoryAttendance(), InMemorySales())
    service = PayrollReportService(InMemoryEmployees(employees), UnreachableForSome(local, {"2"}))

    report = service.build_payroll_report(JAN)

    assert [r["employee_id"] for r in report.rows] == ["1", "3"]
    assert report.missing == ["2"]
    assert report.totals["net_salary"] == "6000.00 ج.م"
    assert len(report.payslips) == 2
