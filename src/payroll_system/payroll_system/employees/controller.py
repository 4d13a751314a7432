from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_errors("Failed to load employees")
    def employees_list():
        branch_id = request.args.get("branch_id") or None
        employees = container.employee_service.list_employees(branch_id=branch_id)
        return jsonify({"success": True, "employees": [e.as_dict() for e in employees]})

    @app.route("/api/branches", methods=["GET"], endpoint="branches_list")
    @api_errors("Failed to load branches")
    def branches_list():
        branches = container.branch_service.list_branches()
        return jsonify({"success": True, "branches": [{"id": b.id, "name": b.name} for b in branches]})

    @app.route("/api/branches/<branch_id>", methods=["DELETE"], endpoint="branches_delete")
    @api_errors("Failed to delete branch. Please try again.")
    def branches_delete(branch_id: str):
        container.branch_service.delete_branch(branch_id)
        return jsonify({"success": True, "message": "Branch deleted successfully."})
