from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.http import CLOCK_MESSAGES, current_role, domain_error, json_error, json_ok, login_required, staff_required
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AlreadyRecordedError, DomainError, ValidationError
from .service import creatable_roles

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    directory = container.directory_service

    @app.route("/api/setup", methods=["GET"], endpoint="setup_status")
    def setup_status():
        return json_ok({"needsSetup": directory.needs_setup()})

    @app.route("/api/setup", methods=["POST"], endpoint="setup_first_admin")
    def setup_first_admin():
        data = request.get_json(silent=True) or {}
        try:
            admin = directory.create_first_admin(name=data.get("name", ""), salary=data.get("salary"))
            return json_ok({"employee": admin.to_dict()}, 201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[directory] first admin setup failed")
            return json_error("Failed to create the admin account.", 500)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        """ID lookup; an Employee login is also their clock event for today."""
        data = request.get_json(silent=True) or {}
        try:
            employee = directory.login(data.get("employeeId", ""))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[directory] login failed")
            return json_error("System error during login.", 500)

        payload: dict = {"employee": employee.to_dict(), "action": None, "record": None, "message": None}
        if employee.role == Role.EMPLOYEE:
            try:
                result = container.attendance_service.record_clock_event(employee.id)
                payload["action"] = result.action.value
                payload["record"] = result.record.to_dict()
                payload["message"] = CLOCK_MESSAGES[result.action]
            except AlreadyRecordedError as e:
                payload["message"] = str(e)
            except Exception:
                logger.exception("[attendance] clock event on login failed employee_id=%s", employee.id)
                return json_error("System error while recording attendance.", 500)

        session.clear()
        session["employee_id"] = employee.id
        session["role"] = employee.role.value
        session["name"] = employee.name
        return json_ok(payload)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return json_ok({"message": "You have been logged out."})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        try:
            employee = directory.get_employee(session["employee_id"])
        except DomainError as e:
            session.clear()
            return domain_error(e)
        return json_ok(
            {
                "employee": employee.to_dict(),
                "creatableRoles": [r.value for r in creatable_roles(employee.role)],
            }
        )

    @app.route("/api/data", methods=["GET"], endpoint="all_data")
    @staff_required
    def all_data():
        try:
            employees = directory.list_employees()
            attendance = {
                e.id: [r.to_dict() for r in container.attendance_service.list_records(e.id)] for e in employees
            }
            payslips = {e.id: [p.to_dict() for p in container.payslip_service.list_for_employee(e.id)] for e in employees}
            return json_ok(
                {
                    "employees": [e.to_dict() for e in employees],
                    "attendance": attendance,
                    "payslips": payslips,
                }
            )
        except Exception:
            logger.exception("[directory] loading all data failed")
            return json_error("Failed to fetch data from the database.", 500)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @staff_required
    def list_employees():
        return json_ok({"employees": [e.to_dict() for e in directory.list_employees()]})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @staff_required
    def add_employee():
        data = request.get_json(silent=True) or {}
        try:
            try:
                role = Role(data.get("role") or Role.EMPLOYEE.value)
            except ValueError:
                raise ValidationError("Invalid role")

            employee = directory.create_employee(
                name=data.get("name", ""),
                salary=data.get("salary"),
                role=role,
                acting_role=current_role(),
            )
            return json_ok({"employee": employee.to_dict(), "message": f"User {employee.name} registered successfully."}, 201)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[directory] add employee failed")
            return json_error("Failed to add employee.", 500)

    @app.route("/api/employees/<employee_id>/salary", methods=["PUT"], endpoint="update_salary")
    @staff_required
    def update_salary(employee_id: str):
        data = request.get_json(silent=True) or {}
        try:
            employee = directory.update_salary(employee_id, data.get("salary"), acting_role=current_role())
            return json_ok({"employee": employee.to_dict(), "message": f"Salary updated for {employee.name}."})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[directory] salary update failed employee_id=%s", employee_id)
            return json_error("Failed to update employee salary.", 500)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @staff_required
    def delete_employee(employee_id: str):
        try:
            directory.delete_employee(employee_id, acting_role=current_role())
            return json_ok({"message": f"Employee {employee_id} deleted successfully."})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[directory] delete failed employee_id=%s", employee_id)
            return json_error("Failed to delete employee.", 500)
