from __future__ import annotations

from dataclasses import dataclass, field

from .attendance.store_repository import StoreAttendanceRepository
from .employee_portal.view import EmployeeView
from .employees.service import DirectoryService
from .employees.store_repository import StoreEmployeeRepository
from .identity.model import Identity
from .identity.service import IdentityGate
from .identity.sessions import SessionRegistry
from .manager_portal.view import ManagerView
from .payroll.service import PayrollService
from .payroll.store_repository import StorePayslipRepository
from .performance.store_repository import StorePerformanceRepository
from .store.base import RecordStore
from .store.connection import StoreConfig
from .store.factory import build_record_store
from .tasks.service import TaskService
from .tasks.store_repository import StoreTaskRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    employees_repo: StoreEmployeeRepository
    tasks_repo: StoreTaskRepository
    attendance_repo: StoreAttendanceRepository
    payslips_repo: StorePayslipRepository
    performance_repo: StorePerformanceRepository

    identity_gate: IdentityGate
    directory_service: DirectoryService
    task_service: TaskService
    payroll_service: PayrollService

    sessions: SessionRegistry = field(default_factory=SessionRegistry)

    def employee_view(self, identity: Identity) -> EmployeeView:
        return EmployeeView(
            identity,
            employees=self.employees_repo,
            tasks=self.tasks_repo,
            attendance=self.attendance_repo,
            payslips=self.payslips_repo,
            performance=self.performance_repo,
            task_service=self.task_service,
            changes=self.store.changes,
        )

    def manager_view(self, identity: Identity) -> ManagerView:
        return ManagerView(
            identity,
            directory=self.directory_service,
            task_service=self.task_service,
            payroll=self.payroll_service,
            tasks=self.tasks_repo,
            payslips=self.payslips_repo,
            performance=self.performance_repo,
            attendance=self.attendance_repo,
        )


def build_container_for_store(store: RecordStore) -> Container:
    employees_repo = StoreEmployeeRepository(store)
    tasks_repo = StoreTaskRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    payslips_repo = StorePayslipRepository(store)
    performance_repo = StorePerformanceRepository(store)

    return Container(
        store=store,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        attendance_repo=attendance_repo,
        payslips_repo=payslips_repo,
        performance_repo=performance_repo,
        identity_gate=IdentityGate(employees_repo),
        directory_service=DirectoryService(employees_repo, performance_repo),
        task_service=TaskService(tasks_repo),
        payroll_service=PayrollService(payslips_repo),
    )


def build_container(*, store_config: StoreConfig, realtime: bool = False) -> Container:
    return build_container_for_store(build_record_store(store_config, realtime=realtime))
