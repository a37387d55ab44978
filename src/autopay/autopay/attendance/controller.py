from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.datetime_utils import now_utc
from ..common.http import CLOCK_MESSAGES, can_view_employee, domain_error, json_error, json_ok, login_required
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import Role
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/api/attendance/clock", methods=["POST"], endpoint="clock")
    @login_required
    def clock():
        if session.get("role") != Role.EMPLOYEE.value:
            return json_error("Only employees record attendance.", 403)

        try:
            result = attendance.record_clock_event(session["employee_id"])
            return json_ok(
                {
                    "action": result.action.value,
                    "record": result.record.to_dict(),
                    "message": CLOCK_MESSAGES[result.action],
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("[attendance] clock event failed employee_id=%s", session.get("employee_id"))
            return json_error("System error while recording attendance.", 500)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        record = attendance.get_today_record(session["employee_id"], now_utc().date())
        if record is None:
            return json_ok({"state": "absent", "record": None})
        return json_ok({"state": "complete" if record.is_complete else "open", "record": attendance.describe(record)})

    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history(employee_id: str):
        if not can_view_employee(employee_id):
            return json_error("You do not have access to this employee.", 403)

        limit = request.args.get("limit", DEFAULT_HISTORY_LIMIT, type=int)
        try:
            container.directory_service.get_employee(employee_id)
            rows = attendance.get_history(employee_id, limit=limit)
        except DomainError as e:
            return domain_error(e)
        return json_ok({"records": [attendance.describe(r) for r in rows]})
