"""Shared fixtures for EduLog tests."""
from datetime import datetime
from typing import List

import pytest

from edulog.models.learning_item import LearningItem, LearningStatus, LearningType
from edulog.services.api_client import LearningApiError
from edulog.services.notifications import Notifier


def make_item(item_id, title, item_type="Course", status="Started", notes=None, link=None):
    return LearningItem(
        _id=item_id,
        title=title,
        type=LearningType(item_type),
        status=LearningStatus(status),
        notes=notes,
        link=link,
        updatedAt=datetime(2026, 10, 1, 12, 0),
    )


class RecordingNotifier(Notifier):
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.successes: List[str] = []
        self.errors: List[str] = []

    def success(self, message: str):
        self.successes.append(message)

    def error(self, message: str):
        self.errors.append(message)


class FakeApiClient:
    """In-memory stand-in for LearningApiClient that records every call."""

    def __init__(self, items=None):
        self.items = list(items or [])
        self.calls = []
        self.fail = False
        self._next_id = 100

    def _check(self):
        if self.fail:
            raise LearningApiError("backend unavailable", status_code=500)

    def list_items(self):
        self.calls.append(("GET", None, None))
        self._check()
        return list(self.items)

    def create_item(self, payload):
        self.calls.append(("POST", None, payload))
        self._check()
        self._next_id += 1
        item = LearningItem(_id=str(self._next_id), updatedAt=datetime(2026, 10, 19), **payload)
        self.items.insert(0, item)
        return item

    def update_item(self, item_id, payload):
        self.calls.append(("PUT", item_id, payload))
        self._check()
        current = next(i for i in self.items if i.id == item_id)
        data = current.model_dump(by_alias=True)
        data.update(payload)
        data["updatedAt"] = datetime(2026, 10, 19)
        updated = LearningItem.model_validate(data)
        self.items = [updated if i.id == item_id else i for i in self.items]
        return updated

    def delete_item(self, item_id):
        self.calls.append(("DELETE", item_id, None))
        self._check()
        self.items = [i for i in self.items if i.id != item_id]


@pytest.fixture
def scenario_items():
    """The two-item list used by the filtering scenarios."""
    return [
        make_item("1", "React", "Course", "Completed"),
        make_item("2", "Go Basics", "Tutorial", "Started"),
    ]


@pytest.fixture
def mixed_items():
    return [
        make_item("1", "React", "Course", "Completed", notes="hooks and context"),
        make_item("2", "Go Basics", "Tutorial", "Started"),
        make_item("3", "DDIA", "Book", "In Progress", notes="Replication chapter"),
        make_item("4", "Touch typing", "Skill", "In Progress"),
        make_item("5", "Docker", "Tutorial", "Completed", link="https://docker.com"),
        make_item("6", "Linear Algebra", "Other", "Started", notes="eigenvalues"),
    ]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fake_client(mixed_items):
    return FakeApiClient(mixed_items)
