"""Example: drive the portals through the service layer (no Flask).

Controllers stay thin; the work happens in views and services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.store.connection import StoreConfig


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=StoreConfig.from_settings(settings))

    identity = container.identity_gate.resolve("emp001", "demo", Role.EMPLOYEE)
    view = container.employee_view(identity)
    view.open()
    try:
        print(view.dashboard())
        for task in view.tasks:
            print(task.due_date, task.status.value, task.title)
    finally:
        view.close()


if __name__ == "__main__":
    main()
