from __future__ import annotations

from datetime import date

import pytest
import requests

from src.salon_payroll.attendance.model import AttendanceRecord
from src.salon_payroll.core.enums import AttendanceStatus, SalaryType
from src.salon_payroll.core.exceptions import PayslipSourceError
from src.salon_payroll.data.mock_store import InMemoryAttendance, InMemorySales
from src.salon_payroll.employees.model import Employee
from src.salon_payroll.payroll.client import PayrollApiClient
from src.salon_payroll.payroll.model import PayPeriod, Payslip
from src.salon_payroll.payroll.sources import (
    FallbackPayslipSource,
    LocalPayslipSource,
    PayslipSource,
    RemotePayslipSource,
)

JAN = PayPeriod(month=1, year=2026)


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self._error:
            raise self._error
        return self._response

    def close(self):
        pass


def _employee(employee_id="1") -> Employee:
    return Employee(
        employee_id=employee_id,
        name=f"emp-{employee_id}",
        salary_type=SalaryType.FIXED,
        base_salary=4000,
        work_days=26,
        shift_hours=8,
    )


def test_client_sends_zero_based_month_and_auth_header():
    session = FakeSession(FakeResponse({"netSalary": 10}))
    client = PayrollApiClient("https://api.example.test/api/", token="tok", timeout=5, session=session)

    data = client.get_employee_payslip("42", JAN)

    assert data == {"netSalary": 10}
    call = session.calls[0]
    assert call["url"] == "https://api.example.test/api/employees/42/payroll"
    assert call["params"] == {"month": 0, "year": 2026}
    assert call["timeout"] == 5.0
    assert session.headers["Authorization"] == "Bearer tok"


def test_client_unwraps_success_envelope():
    session = FakeSession(FakeResponse({"success": True, "data": {"baseSalary": 100}}))
    client = PayrollApiClient("http://x", session=session)

    assert client.get_employee_payslip("1", JAN) == {"baseSalary": 100}


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("down")),
        FakeSession(error=requests.Timeout("slow")),
        FakeSession(FakeResponse({}, status_code=500)),
        FakeSession(FakeResponse(ValueError("bad json"))),
        FakeSession(FakeResponse(["not", "a", "dict"])),
        FakeSession(FakeResponse({"success": False, "data": None, "message": "nope"})),
    ],
)
def test_client_failures_become_payslip_source_errors(session):
    client = PayrollApiClient("http://x", session=session)
    with pytest.raises(PayslipSourceError):
        client.get_employee_payslip("1", JAN)


def test_remote_source_parses_payload_for_requested_employee_and_period():
    payload = {"employeeId": "other", "month": 0, "year": 2026, "baseSalary": "4000", "netSalary": 3900, "lateDays": 2}
    source = RemotePayslipSource(PayrollApiClient("http://x", session=FakeSession(FakeResponse(payload))))

    p = source.get_payslip(_employee("1"), JAN)

    assert p.employee_id == "1"
    assert (p.month, p.year) == (1, 2026)
    assert p.base_salary == 4000
    assert p.net_salary == 3900
    assert p.late_days == 2
    assert p.overtime_pay == 0


def test_local_payslip_round_trips_through_remote_shape():
    attendance = InMemoryAttendance(
        [
            AttendanceRecord(
                record_id="a1",
                employee_id="1",
                work_date=date(2026, 1, 3),
                status=AttendanceStatus.LATE,
                check_in="09:15",
                check_out="18:15",
                advance=50,
            )
        ]
    )
    local = LocalPayslipSource(attendance, InMemorySales(), work_start_time="09:00")
    p = local.get_payslip(_employee("1"), JAN)

    assert Payslip.from_dict(p.to_dict()) == p


class ScriptedSource(PayslipSource):
    def __init__(self, failing_ids=()):
        self.failing_ids = set(failing_ids)
        self.calls = []

    def get_payslip(self, employee, period):
        self.calls.append(employee.employee_id)
        if employee.employee_id in self.failing_ids:
            raise PayslipSourceError("remote down")
        return Payslip(employee_id=employee.employee_id, month=period.month, year=period.year, net_salary=111)


def test_fallback_is_per_employee():
    remote = ScriptedSource(failing_ids={"2"})
    local = LocalPayslipSource(InMemoryAttendance(), InMemorySales())
    source = FallbackPayslipSource(remote, local)

    first = source.get_payslip(_employee("1"), JAN)
    second = source.get_payslip(_employee("2"), JAN)

    assert first.net_salary == 111
    assert second.net_salary == 4000
    assert remote.calls == ["1", "2"]


def test_fallback_does_not_hide_programming_errors():
    class Broken(PayslipSource):
        def get_payslip(self, employee, period):
            raise KeyError("boom")

    source = FallbackPayslipSource(Broken(), LocalPayslipSource(InMemoryAttendance(), InMemorySales()))
    with pytest.raises(KeyError):
        source.get_payslip(_employee(), JAN)
