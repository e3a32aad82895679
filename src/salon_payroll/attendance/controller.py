from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import coerce_date
from ..container import Container
from .service import AttendanceService


def register(app: Flask, container: Container) -> None:
    service = AttendanceService(container.attendance_repo, work_start_time=container.work_start_time)

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        employee_id = request.args.get("employeeId") or None
        raw_date = request.args.get("date") or None
        work_date = coerce_date(raw_date)
        if raw_date and work_date is None:
            return jsonify({"success": False, "message": "Ngày không hợp lệ"}), 400

        data = service.list_ui(employee_id=employee_id, work_date=work_date)
        return jsonify({"success": True, "data": data})
