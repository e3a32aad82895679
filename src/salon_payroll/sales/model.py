from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.numbers import to_float


@dataclass(frozen=True)
class SaleRecord:
    """Thực thể miền (domain): Hoá đơn bán hàng gắn với chuyên viên thực hiện."""

    sale_id: str
    specialist: str
    sale_date: Optional[date]
    amount: float
    specialist_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SaleRecord":
        # POS sales carry "total"; older records only "amount".
        amount = to_float(data.get("total")) or to_float(data.get("amount"))
        specialist_id = data.get("specialistId")
        return cls(
            sale_id=str(data.get("id") or ""),
            specialist=str(data.get("specialist") or "").strip(),
            sale_date=coerce_date(data.get("date") or data.get("createdAt")),
            amount=amount,
            specialist_id=str(specialist_id) if specialist_id else None,
        )
