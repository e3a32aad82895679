from __future__ import annotations

import logging
import math
from collections import deque
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional, Protocol

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..attendance.aggregator import parse_time_to_minutes
from ..common.datetime_utils import now_local
from ..core.constants import (
    APPOINTMENT_REMINDER_LEAD_MINUTES,
    DEFAULT_NOTIFICATION_INTERVAL_SECONDS,
    OPEN_SHIFT_ALERT_HOURS,
)
from .model import Appointment, CashierShift, Notification

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, notification: Notification) -> None:
        raise NotImplementedError


class LoggingNotifier:
    """Logs notifications and keeps the most recent ones for the API."""

    def __init__(self, *, keep: int = 100):
        self._recent: deque[Notification] = deque(maxlen=keep)

    def send(self, notification: Notification) -> None:
        logger.info("[%s] %s", notification.kind, notification.message)
        self._recent.appendleft(notification)

    @property
    def recent(self) -> list[Notification]:
        return list(self._recent)


class NotificationMonitor:
    """Periodic check for upcoming appointments and long-open cashier shifts.

    Each instance owns its "already notified" state, so a fresh monitor
    starts with a clean slate. ``start()``/``stop()`` manage a background
    scheduler; ``check()`` can also be called directly.
    """

    def __init__(
        self,
        notifier: Notifier,
        *,
        appointments_provider: Callable[[], Iterable[Appointment]],
        shifts_provider: Callable[[], Iterable[CashierShift]],
        interval_seconds: int = DEFAULT_NOTIFICATION_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._notifier = notifier
        self._appointments_provider = appointments_provider
        self._shifts_provider = shifts_provider
        self._interval_seconds = int(interval_seconds)
        self._clock = clock
        self._notified_appointments: set[str] = set()
        self._notified_shifts: set[str] = set()
        self._scheduler: Optional[BackgroundScheduler] = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        if self.running:
            return
        scheduler = BackgroundScheduler()
        scheduler.add_job(
            self.check,
            IntervalTrigger(seconds=self._interval_seconds),
            id="notification_check",
            next_run_time=self._clock() + timedelta(seconds=1),
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info("notification monitor started (every %ss)", self._interval_seconds)

    def stop(self) -> None:
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("notification monitor stopped")

    def check(self, now: Optional[datetime] = None) -> list[Notification]:
        now = now or self._clock()
        sent: list[Notification] = []

        try:
            appointments = list(self._appointments_provider())
        except Exception:
            logger.exception("appointment check skipped")
        else:
            sent.extend(self.check_upcoming_appointments(appointments, now=now))

        try:
            shifts = list(self._shifts_provider())
        except Exception:
            logger.exception("open shift check skipped")
        else:
            sent.extend(self.check_open_shifts(shifts, now=now))

        return sent

    def check_upcoming_appointments(self, appointments: Iterable[Appointment], *, now: datetime) -> list[Notification]:
        sent = []
        for a in appointments:
            if not a.is_confirmed or a.appointment_id in self._notified_appointments:
                continue
            minutes_until = _minutes_until(a, now)
            if minutes_until is None or not 0 < minutes_until <= APPOINTMENT_REMINDER_LEAD_MINUTES:
                continue

            self._notified_appointments.add(a.appointment_id)
            sent.append(
                self._send(
                    kind="appointment-reminder",
                    title="⏰ موعد قادم!",
                    message=f"تذكير: موعد {a.customer} مع {a.specialist} بعد {math.ceil(minutes_until)} دقيقة",
                    key=a.appointment_id,
                    now=now,
                )
            )
        return sent

    def check_open_shifts(self, shifts: Iterable[CashierShift], *, now: datetime) -> list[Notification]:
        sent = []
        for s in shifts:
            if not s.is_open or s.start_time is None or s.shift_id in self._notified_shifts:
                continue
            hours_open = (now - _naive(s.start_time, now)).total_seconds() / 3600
            if hours_open < OPEN_SHIFT_ALERT_HOURS:
                continue

            self._notified_shifts.add(s.shift_id)
            sent.append(
                self._send(
                    kind="general",
                    title="🔔 تذكير: أغلق الوردية!",
                    message=f"تنبيه: وردية {s.cashier} مفتوحة منذ {math.floor(hours_open)} ساعة",
                    key=s.shift_id,
                    now=now,
                )
            )
        return sent

    def _send(self, *, kind: str, title: str, message: str, key: str, now: datetime) -> Notification:
        notification = Notification(kind=kind, title=title, message=message, key=key, created_at=now)
        self._notifier.send(notification)
        return notification


def _minutes_until(appointment: Appointment, now: datetime) -> Optional[float]:
    if appointment.appointment_date is None:
        return None
    minutes = parse_time_to_minutes(appointment.time)
    if minutes is None:
        return None
    at = datetime.combine(appointment.appointment_date, datetime.min.time()) + timedelta(minutes=minutes)
    return (at - now.replace(tzinfo=None)).total_seconds() / 60


def _naive(value: datetime, now: datetime) -> datetime:
    # Store timestamps may carry an offset while the clock is local and naive.
    if value.tzinfo is not None and now.tzinfo is None:
        return value.astimezone().replace(tzinfo=None)
    return value
