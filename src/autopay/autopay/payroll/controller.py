from __future__ import annotations

import logging

from flask import Flask, session

from ..common.http import can_view_employee, domain_error, json_error, json_ok, login_required
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    payslips = container.payslip_service

    @app.route("/api/payslips/generate", methods=["POST"], endpoint="generate_payslip")
    @login_required
    def generate_payslip():
        """Generate or replace the current month's payslip of the logged-in employee."""
        employee_id = session["employee_id"]
        try:
            payslip = payslips.generate_for_employee(employee_id)
            return json_ok({"payslip": payslip.to_dict()}, 201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[payroll] payslip generation failed employee_id=%s", employee_id)
            return json_error("There was an error generating the payslip. Please try again.", 500)

    @app.route("/api/employees/<employee_id>/payslips", methods=["GET"], endpoint="list_payslips")
    @login_required
    def list_payslips(employee_id: str):
        if not can_view_employee(employee_id):
            return json_error("You do not have access to this employee.", 403)
        try:
            container.directory_service.get_employee(employee_id)
        except DomainError as e:
            return domain_error(e)
        return json_ok({"payslips": [p.to_dict() for p in payslips.list_for_employee(employee_id)]})
