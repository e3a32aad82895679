from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import PayslipSourceError
from .model import PayPeriod

logger = logging.getLogger(__name__)


class PayrollApiClient:
    """HTTP client for the backend payslip endpoint.

    GET {base_url}/employees/{id}/payroll?month=&year=

    The backend counts months from 0 (January = 0); ``zero_based_month``
    controls the conversion from :class:`PayPeriod`, which counts from 1.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        token: Optional[str] = None,
        zero_based_month: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout)
        self._zero_based_month = zero_based_month
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    def get_employee_payslip(self, employee_id: str, period: PayPeriod) -> dict:
        month = period.month - 1 if self._zero_based_month else period.month
        url = f"{self._base_url}/employees/{employee_id}/payroll"
        logger.debug("GET %s month=%s year=%s", url, month, period.year)

        try:
            response = self._session.get(
                url,
                params={"month": month, "year": period.year},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise PayslipSourceError(f"payslip request failed for employee {employee_id}: {e}") from e
        except ValueError as e:
            raise PayslipSourceError(f"payslip response for employee {employee_id} is not JSON") from e

        return _unwrap(payload, employee_id)

    def close(self) -> None:
        self._session.close()


def _unwrap(payload: Any, employee_id: str) -> dict:
    # Some endpoints answer {"success": true, "data": {...}}.
    if isinstance(payload, dict) and "data" in payload and "success" in payload:
        if not payload.get("success"):
            raise PayslipSourceError(f"backend refused payslip for employee {employee_id}: {payload.get('message')}")
        payload = payload["data"]
    if not isinstance(payload, dict):
        raise PayslipSourceError(f"unexpected payslip payload for employee {employee_id}")
    return payload
