from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds
from ..common.http import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats_all")
    @api_errors("Failed to load attendance statistics")
    def attendance_stats_all():
        month = request.args.get("month") or None
        start, end = month_bounds(month)
        stats = container.attendance_stats_service.all_month_stats(month)
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "stats": {employee_id: s.as_dict() for employee_id, s in stats.items()},
            }
        )

    @app.route("/api/employees/<employee_id>/attendance-stats", methods=["GET"], endpoint="attendance_stats_employee")
    @api_errors("Failed to load attendance statistics")
    def attendance_stats_employee(employee_id: str):
        month = request.args.get("month") or None
        start, end = month_bounds(month)
        employee = container.employee_service.get_employee(employee_id)
        stats = container.attendance_stats_service.employee_month_stats(employee.id, month)
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "employee": {"id": employee.id, "employee_id": employee.employee_id, "name": employee.name},
                "stats": stats.as_dict(),
            }
        )
