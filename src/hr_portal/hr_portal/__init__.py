"""HR Portal package.

Feature modules (employees, tasks, payroll, ...) sit on top of a generic
record store client, with thin Flask controllers for the two portals.
"""
