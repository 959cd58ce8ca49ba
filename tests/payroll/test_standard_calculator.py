from __future__ import annotations

from src.hr_portal.hr_portal.employees.model import Employee
from src.hr_portal.hr_portal.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _employee(base_salary):
    return Employee(
        id="EMP001",
        name="Rajesh Kumar",
        email="rajesh@company.com",
        phone="9876543210",
        department="IT",
        position="Engineer",
        manager="John Doe",
        base_salary=base_salary,
        join_date="2023-01-15",
        status="active",
        leave_balance=8,
    )


def test_standard_pay_line():
    line = StandardPayrollCalculator().pay_line(_employee(50000))

    assert (line.salary, line.bonus, line.deductions) == (50000, 5000, 5000)
    assert line.net_pay == 50000


def test_deductions_are_floored():
    line = StandardPayrollCalculator().pay_line(_employee(45555))

    assert line.deductions == 4555
    assert line.net_pay == 45555 + 5000 - 4555


def test_zero_salary_still_gets_bonus():
    line = StandardPayrollCalculator().pay_line(_employee(0))
    assert (line.deductions, line.net_pay) == (0, 5000)


def test_custom_bonus_and_rate():
    line = StandardPayrollCalculator(bonus=0, deduction_rate=0.2).pay_line(_employee(10000))
    assert (line.bonus, line.deductions, line.net_pay) == (0, 2000, 8000)
