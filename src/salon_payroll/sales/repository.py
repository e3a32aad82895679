from __future__ import annotations

from typing import Protocol, Sequence

from .model import SaleRecord


class SaleRepository(Protocol):
    def list_all(self) -> Sequence[SaleRecord]:
        raise NotImplementedError
