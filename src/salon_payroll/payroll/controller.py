from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.exceptions import NotFoundError, PayslipSourceError, ValidationError
from .export import report_filename, report_to_csv, report_to_xlsx
from .model import PayPeriod

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _period_from_request() -> PayPeriod:
        today = now_local()
        return PayPeriod.parse(
            request.args.get("month", today.month),
            request.args.get("year", today.year),
        )

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _download(body: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/employees/<employee_id>/payroll", methods=["GET"], endpoint="api_employee_payroll")
    def api_employee_payroll(employee_id: str):
        """Payslip in the same shape as the backend payroll endpoint."""
        try:
            period = _period_from_request()
            payslip = container.payroll_report_service.get_employee_payslip(employee_id, period)
        except NotFoundError as e:
            return _error(str(e), 404)
        except ValidationError as e:
            return _error(str(e), 400)
        except PayslipSourceError as e:
            logger.error("payslip for %s unavailable: %s", employee_id, e)
            return _error("Không lấy được phiếu lương", 502)
        return jsonify(payslip.to_dict())

    def _report():
        """Build the salon report for the requested period (optionally one employee).

        Payslip source failures are handled per employee inside the report,
        so only a bad period can fail the whole request.
        """
        period = _period_from_request()
        employee_id = request.args.get("employeeId") or None
        return container.payroll_report_service.build_payroll_report(period, employee_id=employee_id)

    @app.route("/api/payroll", methods=["GET"], endpoint="api_payroll")
    def api_payroll():
        try:
            report = _report()
        except ValidationError as e:
            return _error(str(e), 400)
        return jsonify(
            {
                "success": True,
                "month": report.period.month,
                "year": report.period.year,
                "rows": report.rows,
                "totals": report.totals,
                "negativeNet": report.negative_net,
                "missing": report.missing,
            }
        )

    @app.route("/payroll/report.csv", methods=["GET"], endpoint="payroll_report_csv")
    def payroll_report_csv():
        try:
            report = _report()
        except ValidationError as e:
            return _error(str(e), 400)
        return _download(report_to_csv(report), mimetype="text/csv", filename=report_filename(report, "csv"))

    @app.route("/payroll/report.xlsx", methods=["GET"], endpoint="payroll_report_xlsx")
    def payroll_report_xlsx():
        try:
            report = _report()
        except ValidationError as e:
            return _error(str(e), 400)
        return _download(report_to_xlsx(report), mimetype=XLSX_MIMETYPE, filename=report_filename(report, "xlsx"))
