from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_int_in_range(value: Any, field_name: str, *, low: int, high: int) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if number < low or number > high:
        raise ValidationError(f"{field_name} phải nằm trong khoảng {low}-{high}")
    return number
