from __future__ import annotations

from flask import Flask, request

from ..common.responses import json_error, json_result
from ..container import Container
from ..core.enums import ErrorKind


def register(app: Flask, container: Container) -> None:
    def _json_body():
        return request.get_json(silent=True)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return json_result(container.employee_service.list_all())

    @app.route("/api/employees", methods=["PUT"], endpoint="replace_employees")
    def replace_employees():
        body = _json_body()
        employees = body.get("employees") if isinstance(body, dict) else body
        if not isinstance(employees, list) or not all(isinstance(e, dict) for e in employees):
            return json_error(ErrorKind.MISSING_INPUT, "A list of employees is required")
        return json_result(container.employee_service.replace_all(employees))

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        body = _json_body()
        if not isinstance(body, dict):
            return json_error(ErrorKind.MISSING_INPUT, "Employee data is required")
        return json_result(container.employee_service.add(body))

    @app.route("/api/employees/<path:original_emp_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(original_emp_id: str):
        body = _json_body()
        if not isinstance(body, dict):
            return json_error(ErrorKind.MISSING_INPUT, "Employee data is required")
        return json_result(container.employee_service.update(body, original_emp_id))

    @app.route("/api/employees/<path:emp_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(emp_id: str):
        return json_result(container.employee_service.delete(emp_id))
