from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import ClockAction, Role
from ..core.exceptions import (
    AlreadyRecordedError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    PayrollComputationError,
)

CLOCK_MESSAGES = {
    ClockAction.CHECK_IN: "You have been successfully clocked in for the day.",
    ClockAction.CHECK_OUT: "You have been successfully clocked out. Your hours are recorded.",
}


def json_ok(payload: Optional[dict] = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, AlreadyRecordedError):
        return 409
    if isinstance(error, PayrollComputationError):
        return 422
    # ValidationError and any other rule violation
    return 400


def domain_error(error: DomainError):
    return json_error(str(error), status_for(error))


def current_role() -> Optional[Role]:
    value = session.get("role")
    return Role(value) if value else None


def can_view_employee(employee_id: str) -> bool:
    """Employees see their own data; Admins and Clerks see everyone's."""
    if session.get("employee_id") == employee_id:
        return True
    return current_role() in {Role.ADMIN, Role.CLERK}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return json_error("Please log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper


def staff_required(view):
    """Allow only Admin and Clerk roles (the administration panel)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return json_error("Please log in to continue.", 401)
        if current_role() not in {Role.ADMIN, Role.CLERK}:
            return json_error("You do not have access to the administration panel.", 403)
        return view(*args, **kwargs)

    return wrapper
