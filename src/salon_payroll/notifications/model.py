from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime

# Only confirmed appointments get reminders.
CONFIRMED_APPOINTMENT_STATUSES = {"مؤكد", "confirmed"}


@dataclass(frozen=True)
class Appointment:
    appointment_id: str
    customer: str
    specialist: str
    appointment_date: Optional[date]
    time: str
    status: str = ""
    service: str = ""

    @property
    def is_confirmed(self) -> bool:
        return self.status.strip().lower() in CONFIRMED_APPOINTMENT_STATUSES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Appointment":
        return cls(
            appointment_id=str(data.get("id") or ""),
            customer=str(data.get("customerName") or data.get("customer") or ""),
            specialist=str(data.get("specialist") or ""),
            appointment_date=coerce_date(data.get("date")),
            time=str(data.get("time") or ""),
            status=str(data.get("status") or ""),
            service=str(data.get("service") or ""),
        )


@dataclass(frozen=True)
class CashierShift:
    """Ca thu ngân (mở/đóng két)."""

    shift_id: str
    cashier: str
    start_time: Optional[datetime]
    status: str = "open"

    @property
    def is_open(self) -> bool:
        return self.status == "open"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CashierShift":
        return cls(
            shift_id=str(data.get("id") or ""),
            cashier=str(data.get("cashier") or ""),
            start_time=coerce_datetime(data.get("startTime")),
            status=str(data.get("status") or "open"),
        )


@dataclass(frozen=True)
class Notification:
    kind: str
    title: str
    message: str
    key: str
    created_at: datetime
