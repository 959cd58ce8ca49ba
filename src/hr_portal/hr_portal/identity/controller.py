from __future__ import annotations

import logging
import traceback
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError, NotFoundError, StoreError, ValidationError
from .model import Identity

logger = logging.getLogger(__name__)

SESSION_IDENTITY = "identity"
SESSION_VIEW_KEY = "view_key"


def current_identity() -> Optional[Identity]:
    data = session.get(SESSION_IDENTITY)
    return Identity.from_session(data) if data else None


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def domain_error(e: DomainError, action: str):
    if isinstance(e, ValidationError):
        return fail(str(e), 400)
    if isinstance(e, NotFoundError):
        return fail(str(e), 404)
    if isinstance(e, StoreError):
        return fail(f"Error {action}: {e}", 502)
    return fail(str(e), 400)


def system_error(app: Flask, e: Exception, action: str):
    traceback.print_exc()
    logger.error("Unexpected error while %s: %s", action, e)
    if bool(app.config.get("DEBUG", False)):
        return fail(f"System error while {action}: {e}", 500)
    return fail(f"System error while {action}", 500)


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = current_identity()
            if identity is None:
                return fail("Please log in to continue", 401)
            if identity.role != role:
                return fail("This portal is not available for your role", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


employee_required = role_required(Role.EMPLOYEE)
manager_required = role_required(Role.MANAGER)


def _new_view(container: Container, identity: Identity):
    if identity.role == Role.EMPLOYEE:
        return container.employee_view(identity)
    return container.manager_view(identity)


def portal_view(container: Container):
    """Live view for the current session, rebuilt if this process lost it."""
    identity = current_identity()

    def factory():
        view = _new_view(container, identity)
        view.open()
        return view

    key, view = container.sessions.get_or_open(
        session.get(SESSION_VIEW_KEY),
        factory,
        owner=identity.session_owner,
    )
    session[SESSION_VIEW_KEY] = key
    return view


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or request.form
        username = payload.get("username", "")
        password = payload.get("password", "")
        role = payload.get("role", Role.EMPLOYEE.value)

        try:
            identity = container.identity_gate.resolve(username, password, role)
        except DomainError as e:
            return domain_error(e, "logging in")
        except Exception as e:
            return system_error(app, e, "logging in")

        # Replace any previous identity wholesale.
        container.sessions.close(session.get(SESSION_VIEW_KEY))
        session.clear()

        try:
            view = _new_view(container, identity)
            failed = view.open()
        except DomainError as e:
            return domain_error(e, "logging in")
        except Exception as e:
            return system_error(app, e, "logging in")

        session[SESSION_IDENTITY] = identity.to_session()
        session[SESSION_VIEW_KEY] = container.sessions.open(view, owner=identity.session_owner)

        logger.info("Login: %s as %s", identity.display_name, identity.role.value)
        return jsonify(
            {
                "success": True,
                "message": f"Welcome, {identity.display_name}",
                "identity": identity.to_session(),
                "failed_loads": failed,
            }
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.sessions.close(session.get(SESSION_VIEW_KEY))
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/me", methods=["GET"], endpoint="me")
    def me():
        identity = current_identity()
        if identity is None:
            return fail("Not logged in", 401)
        return jsonify({"success": True, "identity": identity.to_session()})
