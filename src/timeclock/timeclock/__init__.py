"""Time Clock package.

Organized by feature modules (employees, time entries, sessions, ...) with a
thin Flask controller layer over service/repository layers. The session
reconstructor in `sessions.reconstructor` is the computational core.
"""
from __future__ import annotations

from .container import Container, build_container, build_memory_container
from .sessions.model import WorkSession
from .sessions.reconstructor import reconstruct_sessions
from .time_entries.model import ClockEvent

__all__ = [
    "ClockEvent",
    "Container",
    "WorkSession",
    "build_container",
    "build_memory_container",
    "reconstruct_sessions",
]
