"""Example: using the service layer without Flask.

Controllers are a thin layer; the clock logic lives in the services.
"""

from datetime import datetime

from src.timeclock.timeclock.container import build_memory_container
from src.timeclock.timeclock.core.enums import EmployeeRole


def main():
    container = build_memory_container()
    alice = container.employee_service.create(name="Alice", email="alice@example.com", role=EmployeeRole.MANAGER)

    clock = container.time_tracking_service
    clock.clock_in(alice.employee_id, now=datetime(2026, 3, 2, 8, 0).astimezone())
    clock.clock_out(alice.employee_id, now=datetime(2026, 3, 2, 17, 0).astimezone())

    for session in clock.get_work_sessions(alice.employee_id):
        print(session.date, session.clock_in.time(), session.clock_out.time(), session.total_hours)


if __name__ == "__main__":
    main()
