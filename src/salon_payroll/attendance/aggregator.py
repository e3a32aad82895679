"""Per-record attendance helpers shared by every payroll and attendance view.

All functions are pure and never raise on malformed input: an unusable time
is reported as ``None`` and shown as "-".
"""
from __future__ import annotations

import math
import re
from typing import Any, Optional

from ..common.numbers import to_int, to_optional_float
from ..core.enums import AttendanceStatus

_ISO_TIME_END = re.compile(r"[.Z+\-]")


def parse_time_to_minutes(value: Any) -> Optional[int]:
    """Minutes since midnight for "HH:MM", "HH:MM:SS" or an ISO timestamp.

    Seconds are ignored. Returns None for empty input, non-integer segments
    and out-of-range hours (0-23) or minutes (0-59).
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    if "T" in text:
        text = text.split("T", 1)[1]
        match = _ISO_TIME_END.search(text)
        if match:
            text = text[: match.start()]

    parts = text.split(":")
    if len(parts) < 2:
        return None
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        return None

    hours, minutes = numbers[0], numbers[1]
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        return None
    return hours * 60 + minutes


def compute_work_hours(check_in: Any, check_out: Any) -> Optional[float]:
    """Decimal hours between check-in and check-out on the same day.

    None when either time is missing/invalid or check-out is before check-in
    (overnight shifts are not wrapped).
    """
    start = parse_time_to_minutes(check_in)
    end = parse_time_to_minutes(check_out)
    if start is None or end is None:
        return None
    diff = end - start
    if diff < 0:
        return None
    return diff / 60


def display_work_hours(record: Any) -> Optional[float]:
    """Work hours for a record: live check-in/out difference first, stored value second."""
    computed = compute_work_hours(getattr(record, "check_in", None), getattr(record, "check_out", None))
    if computed is not None:
        return computed
    return to_optional_float(getattr(record, "work_hours", None))


def late_minutes(record: Any, scheduled_start: Optional[str]) -> int:
    """Minutes late for a record.

    An explicit positive ``late_minutes`` wins. Otherwise, for LATE records
    with a check-in and a configured start time, the difference is derived.
    """
    explicit = to_int(getattr(record, "late_minutes", None))
    if explicit > 0:
        return explicit

    if AttendanceStatus.normalize(getattr(record, "status", None)) != AttendanceStatus.LATE:
        return 0

    check_in = parse_time_to_minutes(getattr(record, "check_in", None))
    start = parse_time_to_minutes(scheduled_start)
    if check_in is None or start is None:
        return 0
    return max(0, check_in - start)


def format_hours_for_display(hours: Optional[float]) -> str:
    """8.5 -> "8:30"; None -> "-"."""
    if hours is None or math.isnan(hours):
        return "-"
    whole = math.floor(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole += 1
        minutes = 0
    return f"{whole}:{minutes:02d}"


def format_time_12h(value: Any) -> str:
    """"13:00" -> "1:00 PM". Empty gives "-", unparseable input is echoed back."""
    if not isinstance(value, str) or not value.strip():
        return "-"
    total = parse_time_to_minutes(value)
    if total is None:
        return value.strip()
    hours, minutes = divmod(total, 60)
    period = "AM" if hours < 12 else "PM"
    h12 = 12 if hours == 0 else hours - 12 if hours > 12 else hours
    return f"{h12}:{minutes:02d} {period}"
