from __future__ import annotations

import math
from typing import Any, Optional


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce a stored number (int, float, numeric string) to float.

    Empty, missing, non-numeric and non-finite values give ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip()
        if not text:
            return default
        try:
            result = float(text)
        except ValueError:
            return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def to_optional_float(value: Any) -> Optional[float]:
    """Same as :func:`to_float` but keeps "no value" as ``None``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    result = to_float(value, default=math.nan)
    return None if math.isnan(result) else result


def to_int(value: Any, default: int = 0) -> int:
    """Coerce to int, truncating decimals ("30.7" -> 30)."""
    result = to_float(value, default=math.nan)
    if math.isnan(result):
        return default
    return int(result)


def safe_div(numerator: float, denominator: float) -> float:
    """Division that yields 0 instead of raising or returning inf/nan."""
    if not denominator:
        return 0.0
    result = numerator / denominator
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result
