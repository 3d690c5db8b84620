from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Kind of a clock event as stored in `time_entries.type`."""

    CLOCK_IN = "clock-in"
    CLOCK_OUT = "clock-out"


class ClockStatus(str, Enum):
    CLOCKED_IN = "clocked-in"
    CLOCKED_OUT = "clocked-out"


class EmployeeRole(str, Enum):
    EMPLOYEE = "employee"
    MANAGER = "manager"


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"
