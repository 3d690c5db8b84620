from __future__ import annotations

import pytest

from src.timeclock.timeclock.core.enums import EmployeeRole
from src.timeclock.timeclock.core.exceptions import NotFoundError, ValidationError
from src.timeclock.timeclock.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.timeclock.timeclock.employees.service import EmployeeService


@pytest.fixture
def service(alice, bob):
    return EmployeeService(InMemoryEmployeeRepository([bob, alice]))


def test_list_active_is_ordered_by_name(service):
    assert [e.name for e in service.list_active()] == ["Alice", "Bob"]


def test_create_normalizes_and_stores(service):
    created = service.create(name="  Carol ", email="Carol@Example.com", role="manager", department="HR")

    assert created.name == "Carol"
    assert created.email == "carol@example.com"
    assert created.role == EmployeeRole.MANAGER
    assert service.get(created.employee_id) == created


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "email": "x@example.com"},
        {"name": "X", "email": "not-an-email"},
        {"name": "X", "email": "x@example.com", "role": "admin"},
        {"name": "Dup", "email": "alice@example.com"},
    ],
)
def test_create_rejects_invalid_input(service, kwargs):
    with pytest.raises(ValidationError):
        service.create(**kwargs)


def test_update_changes_only_given_fields(service, alice):
    updated = service.update(alice.employee_id, position="Supervisor", name=None)

    assert updated.position == "Supervisor"
    assert updated.name == "Alice"
    assert service.get(alice.employee_id).position == "Supervisor"


def test_update_rejects_taken_email(service, alice):
    with pytest.raises(ValidationError):
        service.update(alice.employee_id, email="bob@example.com")


def test_update_rejects_unknown_fields(service, alice):
    with pytest.raises(ValidationError):
        service.update(alice.employee_id, is_active=False)


def test_deactivate_is_a_soft_delete(service, alice):
    service.deactivate(alice.employee_id)

    assert [e.name for e in service.list_active()] == ["Bob"]
    assert service.get(alice.employee_id).is_active is False


def test_unknown_employee_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.get("ghost")
    with pytest.raises(NotFoundError):
        service.deactivate("ghost")
