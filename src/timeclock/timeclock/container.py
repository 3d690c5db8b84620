from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Iterable, Optional

from .analytics.service import AnalyticsService
from .core.constants import DEFAULT_MEMORY_LOG_CAPACITY, DEFAULT_NOTIFICATION_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.model import Employee
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .notifications.memory_notification_repository import InMemoryNotificationRepository
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.repository import NotificationRepository
from .notifications.service import NotificationService
from .sessions.factory import PairingStrategyFactory
from .time_entries.memory_time_entry_repository import InMemoryTimeEntryRepository
from .time_entries.model import ClockEvent
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_tracking.service import TimeTrackingService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    time_entries_repo: TimeEntryRepository
    notifications_repo: NotificationRepository

    employee_service: EmployeeService
    notification_service: NotificationService
    time_tracking_service: TimeTrackingService
    analytics_service: AnalyticsService


def _wire(
    *,
    conn: Optional[DatabaseConnection],
    employees_repo: EmployeeRepository,
    time_entries_repo: TimeEntryRepository,
    notifications_repo: NotificationRepository,
    pairing: Optional[str],
    notification_limit: int,
    tz: Optional[tzinfo],
) -> Container:
    notification_service = NotificationService(notifications_repo, default_limit=notification_limit)
    time_tracking_service = TimeTrackingService(
        time_entries_repo,
        employees_repo,
        notification_service,
        pairing=PairingStrategyFactory().for_name(pairing),
        tz=tz,
    )
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        time_entries_repo=time_entries_repo,
        notifications_repo=notifications_repo,
        employee_service=EmployeeService(employees_repo),
        notification_service=notification_service,
        time_tracking_service=time_tracking_service,
        analytics_service=AnalyticsService(time_tracking_service),
    )


def build_container(
    *,
    db_config: dict,
    pairing: Optional[str] = None,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT,
    tz: Optional[tzinfo] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        time_entries_repo=MySQLTimeEntryRepository(conn),
        notifications_repo=MySQLNotificationRepository(conn),
        pairing=pairing,
        notification_limit=notification_limit,
        tz=tz,
    )


def build_memory_container(
    *,
    employees: Iterable[Employee] = (),
    events: Iterable[ClockEvent] = (),
    capacity: int = DEFAULT_MEMORY_LOG_CAPACITY,
    pairing: Optional[str] = None,
    notification_limit: int = DEFAULT_NOTIFICATION_LIMIT,
    tz: Optional[tzinfo] = None,
) -> Container:
    """Store-less wiring used by tests and the `memory` backend."""
    return _wire(
        conn=None,
        employees_repo=InMemoryEmployeeRepository(employees),
        time_entries_repo=InMemoryTimeEntryRepository(list(events), capacity=capacity),
        notifications_repo=InMemoryNotificationRepository(),
        pairing=pairing,
        notification_limit=notification_limit,
        tz=tz,
    )
