"""In-memory store used in "frontend only / mock data" mode.

The repositories here satisfy the repository protocols of each feature
module, so a real backend-backed implementation can replace them without
touching services.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee
from ..notifications.model import Appointment, CashierShift
from ..sales.model import SaleRecord

logger = logging.getLogger(__name__)

DEFAULT_MOCK_DATA_PATH = Path(__file__).resolve().parent / "mock_data.json"


class InMemoryEmployees:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def list_all(self) -> Sequence[Employee]:
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(str(employee_id))


class InMemoryAttendance:
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._records)

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.employee_id == str(employee_id)]

    def query(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        items = self._records
        if employee_id is not None:
            items = [r for r in items if r.employee_id == str(employee_id)]
        if work_date is not None:
            items = [r for r in items if r.work_date == work_date]
        return sorted(items, key=lambda r: (r.work_date, r.employee_id), reverse=True)


class InMemorySales:
    def __init__(self, sales: Iterable[SaleRecord] = ()):
        self._sales: list[SaleRecord] = list(sales)

    def list_all(self) -> Sequence[SaleRecord]:
        return list(self._sales)


@dataclass
class MockStore:
    employees: InMemoryEmployees = field(default_factory=InMemoryEmployees)
    attendance: InMemoryAttendance = field(default_factory=InMemoryAttendance)
    sales: InMemorySales = field(default_factory=InMemorySales)
    appointments: list[Appointment] = field(default_factory=list)
    cashier_shifts: list[CashierShift] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MockStore":
        employees = [Employee.from_dict(e) for e in data.get("employees") or []]

        attendance = []
        for raw in data.get("attendance") or []:
            record = AttendanceRecord.from_dict(raw)
            if record is None:
                logger.warning("skipping attendance record %r: unusable date %r", raw.get("id"), raw.get("date"))
                continue
            attendance.append(record)

        return cls(
            employees=InMemoryEmployees(employees),
            attendance=InMemoryAttendance(attendance),
            sales=InMemorySales(SaleRecord.from_dict(s) for s in data.get("sales") or []),
            appointments=[Appointment.from_dict(a) for a in data.get("appointments") or []],
            cashier_shifts=[CashierShift.from_dict(s) for s in data.get("shifts") or []],
        )


def load_mock_store(path: Optional[Path] = None) -> MockStore:
    path = Path(path) if path else DEFAULT_MOCK_DATA_PATH
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    store = MockStore.from_dict(data)
    logger.info(
        "mock store loaded from %s (employees=%d, attendance=%d, sales=%d)",
        path,
        len(store.employees.list_all()),
        len(store.attendance.list_all()),
        len(store.sales.list_all()),
    )
    return store
