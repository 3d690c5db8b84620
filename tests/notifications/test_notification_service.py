from __future__ import annotations

import pytest

from src.timeclock.timeclock.core.enums import NotificationType
from src.timeclock.timeclock.core.exceptions import NotFoundError, ValidationError
from src.timeclock.timeclock.notifications.memory_notification_repository import InMemoryNotificationRepository
from src.timeclock.timeclock.notifications.service import NotificationService

from tests.helpers import at


@pytest.fixture
def service():
    return NotificationService(InMemoryNotificationRepository(), default_limit=3)


def test_recent_is_newest_first_and_limited(service):
    for hour in range(8, 13):
        service.notify("E", f"t{hour}", "m", now=at(2, hour))
    service.notify("OTHER", "x", "m", now=at(2, 14))

    items = service.recent("E")

    assert [n.title for n in items] == ["t12", "t11", "t10"]
    assert len(service.recent("E", limit=10)) == 5


def test_notify_accepts_type_values(service):
    service.notify("E", "Heads up", "late", "warning", now=at(2, 8))

    assert service.recent("E")[0].type == NotificationType.WARNING


def test_notify_requires_title(service):
    with pytest.raises(ValidationError):
        service.notify("E", " ", "m")


def test_mark_read(service):
    nid = service.notify("E", "t", "m", now=at(2, 8))

    service.mark_read(nid)

    assert service.recent("E")[0].read is True


def test_mark_read_unknown_raises(service):
    with pytest.raises(NotFoundError):
        service.mark_read(999)
