from __future__ import annotations

from enum import Enum
from typing import Any


class SalaryType(str, Enum):
    """Cách tính lương cơ bản: cố định theo tháng, theo ngày công, theo giờ."""

    FIXED = "ثابت"
    DAILY = "يومي"
    HOURLY = "بالساعة"

    @classmethod
    def parse(cls, value: Any) -> "SalaryType":
        """Map stored labels (Arabic or English) to a salary type. Unknown -> FIXED."""
        if isinstance(value, SalaryType):
            return value
        key = str(value or "").strip().lower()
        return _SALARY_TYPE_ALIASES.get(key, cls.FIXED)


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công chuẩn hoá (một giá trị duy nhất cho mỗi biến thể)."""

    PRESENT = "حاضر"
    ABSENT = "غائب"
    LATE = "تأخير"
    LEAVE = "إجازة"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def normalize(cls, value: Any) -> "AttendanceStatus":
        """Resolve every stored spelling to one status.

        Both "تأخير" and "متأخر" occur for late records and mean the same thing.
        """
        if isinstance(value, AttendanceStatus):
            return value
        key = str(value or "").strip().lower()
        return _STATUS_ALIASES.get(key, cls.UNKNOWN)

    @property
    def counts_as_present(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


_SALARY_TYPE_ALIASES = {
    "ثابت": SalaryType.FIXED,
    "fixed": SalaryType.FIXED,
    "monthly": SalaryType.FIXED,
    "يومي": SalaryType.DAILY,
    "daily": SalaryType.DAILY,
    "بالساعة": SalaryType.HOURLY,
    "hourly": SalaryType.HOURLY,
}

_STATUS_ALIASES = {
    "حاضر": AttendanceStatus.PRESENT,
    "present": AttendanceStatus.PRESENT,
    "غائب": AttendanceStatus.ABSENT,
    "absent": AttendanceStatus.ABSENT,
    "تأخير": AttendanceStatus.LATE,
    "متأخر": AttendanceStatus.LATE,
    "late": AttendanceStatus.LATE,
    "delay": AttendanceStatus.LATE,
    "إجازة": AttendanceStatus.LEAVE,
    "leave": AttendanceStatus.LEAVE,
}
