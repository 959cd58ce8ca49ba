from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.numbers import as_int, as_number
from ..container import Container
from ..core.constants import DEFAULT_DEPARTMENT, DEFAULT_LEAVE_BALANCE
from ..core.exceptions import DomainError, ValidationError
from ..employees.service import EmployeeUpdate, NewEmployee
from ..identity.controller import domain_error, manager_required, portal_view, system_error


def _payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data


def _number(data: dict, name: str, default, *, integer: bool = False):
    try:
        return as_int(data.get(name), default) if integer else as_number(data.get(name), default)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}")


def _confirmed(data: dict) -> bool:
    value = data.get("confirm", request.args.get("confirm", ""))
    return str(value).lower() in {"1", "true", "yes"}


def register(app: Flask, container: Container) -> None:
    @app.route("/manager/dashboard", methods=["GET"], endpoint="manager_dashboard")
    @manager_required
    def manager_dashboard():
        view = portal_view(container)
        try:
            failed = view.load_all() if request.args.get("refresh") else []
            dashboard = view.dashboard()
        except DomainError as e:
            return domain_error(e, "loading dashboard")
        return jsonify({"success": True, "failed_loads": failed, "dashboard": dashboard, **view.snapshot()})

    # ---- employees ----

    @app.route("/manager/employees", methods=["GET"], endpoint="manager_employees")
    @manager_required
    def manager_employees():
        try:
            employees = portal_view(container).load_directory()
        except DomainError as e:
            return domain_error(e, "loading employees")
        return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})

    @app.route("/manager/employees", methods=["POST"], endpoint="manager_add_employee")
    @manager_required
    def manager_add_employee():
        data = _payload()
        try:
            employee = portal_view(container).add_employee(
                NewEmployee(
                    id=data.get("id", ""),
                    name=data.get("name", ""),
                    email=data.get("email", ""),
                    phone=data.get("phone", ""),
                    position=data.get("position", ""),
                    join_date=data.get("join_date", ""),
                    department=data.get("department") or DEFAULT_DEPARTMENT,
                    base_salary=_number(data, "base_salary", 0),
                )
            )
        except DomainError as e:
            return domain_error(e, "adding employee")
        except Exception as e:
            return system_error(app, e, "adding employee")
        return jsonify({"success": True, "message": "Employee added successfully!", "employee": employee.to_dict()}), 201

    @app.route("/manager/employees/<emp_id>", methods=["PUT"], endpoint="manager_edit_employee")
    @manager_required
    def manager_edit_employee(emp_id: str):
        data = _payload()
        try:
            employee = portal_view(container).edit_employee(
                EmployeeUpdate(
                    id=emp_id,
                    name=data.get("name", ""),
                    email=data.get("email", ""),
                    phone=data.get("phone", ""),
                    department=data.get("department") or DEFAULT_DEPARTMENT,
                    position=data.get("position", ""),
                    base_salary=_number(data, "base_salary", 0),
                    join_date=data.get("join_date", ""),
                    leave_balance=_number(data, "leave_balance", DEFAULT_LEAVE_BALANCE, integer=True),
                )
            )
        except DomainError as e:
            return domain_error(e, "updating employee")
        except Exception as e:
            return system_error(app, e, "updating employee")
        return jsonify({"success": True, "message": "Employee updated successfully!", "employee": employee.to_dict()})

    @app.route("/manager/employees/<emp_id>", methods=["DELETE"], endpoint="manager_delete_employee")
    @manager_required
    def manager_delete_employee(emp_id: str):
        data = _payload()
        try:
            portal_view(container).delete_employee(emp_id, confirmed=_confirmed(data))
        except DomainError as e:
            return domain_error(e, "deleting employee")
        except Exception as e:
            return system_error(app, e, "deleting employee")
        return jsonify({"success": True, "message": "Employee deleted successfully"})

    # ---- tasks ----

    @app.route("/manager/tasks", methods=["GET"], endpoint="manager_tasks")
    @manager_required
    def manager_tasks():
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

    @app.route("/manager/tasks", methods=["POST"], endpoint="manager_assign_task")
    @manager_required
    def manager_assign_task():
        data = _payload()
        try:
            task = portal_view(container).assign_task(
                assigned_to=data.get("assigned_to", ""),
                title=data.get("title", ""),
                due_date=data.get("due_date", ""),
            )
        except DomainError as e:
            return domain_error(e, "assigning task")
        except Exception as e:
            return system_error(app, e, "assigning task")
        return jsonify({"success": True, "message": "Task assigned successfully!", "task": task.to_dict()}), 201

    @app.route("/manager/tasks/<int:task_id>", methods=["DELETE"], endpoint="manager_delete_task")
    @manager_required
    def manager_delete_task(task_id: int):
        data = _payload()
        try:
            portal_view(container).delete_task(task_id, confirmed=_confirmed(data))
        except DomainError as e:
            return domain_error(e, "deleting task")
        except Exception as e:
            return system_error(app, e, "deleting task")
        return jsonify({"success": True, "message": "Task deleted"})

    # ---- payroll ----

    @app.route("/manager/payroll", methods=["GET"], endpoint="manager_payroll")
    @manager_required
    def manager_payroll():
        view = portal_view(container)
        try:
            view.load_payslips()
        except DomainError as e:
            return domain_error(e, "loading payslips")
        return jsonify(
            {
                "success": True,
                "preview": [line.to_dict() for line in view.preview_payroll()],
                "payslips": [p.to_dict() for p in view.payslips],
            }
        )

    @app.route("/manager/payroll", methods=["POST"], endpoint="manager_process_payroll")
    @manager_required
    def manager_process_payroll():
        try:
            run = portal_view(container).process_payroll()
        except DomainError as e:
            return domain_error(e, "processing payroll")
        except Exception as e:
            return system_error(app, e, "processing payroll")

        if run.complete:
            message = "Payroll processed successfully for all employees!"
        else:
            message = f"Payroll processed for {len(run.processed)} employees, {len(run.failed)} failed"
        return jsonify({"success": run.complete, "message": message, "run": run.to_dict()})

    # ---- performance ----

    @app.route("/manager/performance", methods=["GET"], endpoint="manager_performance")
    @manager_required
    def manager_performance():
        try:
            records = portal_view(container).load_performance()
        except DomainError as e:
            return domain_error(e, "loading performance")
        return jsonify({"success": True, "performance": [p.to_dict() for p in records]})

    @app.route(
        "/manager/performance/<emp_id>/review",
        methods=["POST"],
        endpoint="manager_review_performance",
    )
    @manager_required
    def manager_review_performance(emp_id: str):
        try:
            message = portal_view(container).review_performance(emp_id)
        except DomainError as e:
            return domain_error(e, "reviewing performance")
        return jsonify({"success": True, "message": message})
