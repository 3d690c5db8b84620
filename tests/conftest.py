from __future__ import annotations

from datetime import datetime
from itertools import count

import pytest

from src.timeclock.timeclock.container import build_memory_container
from src.timeclock.timeclock.core.enums import EmployeeRole, EventKind
from src.timeclock.timeclock.employees.model import Employee
from src.timeclock.timeclock.main import create_app
from src.timeclock.timeclock.time_entries.model import ClockEvent

from tests.helpers import TZ, at


@pytest.fixture
def tz():
    return TZ


@pytest.fixture
def make_event():
    ids = count(1)

    def _make(employee_id: str, kind: EventKind | str, timestamp: datetime, **extra) -> ClockEvent:
        return ClockEvent(
            event_id=f"e{next(ids):04d}",
            employee_id=employee_id,
            kind=kind,
            timestamp=timestamp,
            **extra,
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return at(2, 8, 0)


@pytest.fixture
def alice() -> Employee:
    return Employee(
        employee_id="emp-alice",
        name="Alice",
        email="alice@example.com",
        role=EmployeeRole.EMPLOYEE,
        department="Ops",
        position="Operator",
    )


@pytest.fixture
def bob() -> Employee:
    return Employee(
        employee_id="emp-bob",
        name="Bob",
        email="bob@example.com",
        role=EmployeeRole.MANAGER,
        department="Ops",
        position="Lead",
    )


@pytest.fixture
def container(alice, bob):
    return build_memory_container(employees=[alice, bob], tz=TZ)


@pytest.fixture
def client(container):
    app = create_app(settings_module="config.testing", container=container)
    return app.test_client()
