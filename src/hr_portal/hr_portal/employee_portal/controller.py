from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import DomainError
from ..identity.controller import domain_error, employee_required, portal_view, system_error


def register(app: Flask, container: Container) -> None:
    @app.route("/employee/dashboard", methods=["GET"], endpoint="employee_dashboard")
    @employee_required
    def employee_dashboard():
        view = portal_view(container)
        failed = view.load_all() if request.args.get("refresh") else []
        return jsonify({"success": True, "failed_loads": failed, **view.snapshot()})

    @app.route("/employee/profile", methods=["GET"], endpoint="employee_profile")
    @employee_required
    def employee_profile():
        try:
            profile = portal_view(container).load_profile()
        except DomainError as e:
            return domain_error(e, "loading profile")
        return jsonify({"success": True, "profile": profile.to_dict() if profile else None})

    @app.route("/employee/tasks", methods=["GET"], endpoint="employee_tasks")
    @employee_required
    def employee_tasks():
        view = portal_view(container)
        try:
            tasks = view.load_tasks()
        except DomainError as e:
            return domain_error(e, "loading tasks")
        return jsonify(
            {
                "success": True,
                "tasks": [t.to_dict() for t in tasks],
                "pending_tasks": view.pending_task_count,
            }
        )

    @app.route("/employee/tasks/<int:task_id>/toggle", methods=["POST"], endpoint="employee_toggle_task")
    @employee_required
    def employee_toggle_task(task_id: int):
        payload = request.get_json(silent=True) or request.form
        view = portal_view(container)
        try:
            message = view.toggle_task(task_id, payload.get("status", ""))
        except DomainError as e:
            return domain_error(e, "updating task")
        except Exception as e:
            return system_error(app, e, "updating task")
        return jsonify({"success": True, "message": message, "tasks": [t.to_dict() for t in view.tasks]})

    @app.route("/employee/attendance", methods=["GET"], endpoint="employee_attendance")
    @employee_required
    def employee_attendance():
        view = portal_view(container)
        try:
            rows = view.load_attendance()
        except DomainError as e:
            return domain_error(e, "loading attendance")
        return jsonify(
            {
                "success": True,
                "attendance": [a.to_dict() for a in rows],
                "present_days": view.present_day_count,
            }
        )

    @app.route("/employee/payslips", methods=["GET"], endpoint="employee_payslips")
    @employee_required
    def employee_payslips():
        try:
            payslips = portal_view(container).load_payslips()
        except DomainError as e:
            return domain_error(e, "loading payslips")
        return jsonify({"success": True, "payslips": [p.to_dict() for p in payslips]})

    @app.route(
        "/employee/payslips/<int:payslip_id>/download",
        methods=["POST"],
        endpoint="employee_download_payslip",
    )
    @employee_required
    def employee_download_payslip(payslip_id: int):
        try:
            message = portal_view(container).request_payslip_download(payslip_id)
        except DomainError as e:
            return domain_error(e, "downloading payslip")
        return jsonify({"success": True, "message": message})

    @app.route("/employee/performance", methods=["GET"], endpoint="employee_performance")
    @employee_required
    def employee_performance():
        try:
            record = portal_view(container).load_performance()
        except DomainError as e:
            return domain_error(e, "loading performance")
        return jsonify({"success": True, "performance": record.to_dict() if record else None})
