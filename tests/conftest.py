"""Shared fixtures: in-memory Firestore and a recording FCM sender."""

from __future__ import annotations

import copy
import itertools
import pathlib
import sys
from datetime import datetime, timezone
from typing import Any

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from forager_notifications.application.use_cases.notifications import NotificationServices
from forager_notifications.infrastructure.notifications import PushDispatcher


class FakeSnapshot:
    def __init__(self, doc_id: str, data: dict[str, Any] | None) -> None:
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, db: "FakeFirestore", path: str) -> None:
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def get(self) -> FakeSnapshot:
        if self.path in self._db.failing_reads:
            raise RuntimeError(f"read failed for {self.path}")
        return FakeSnapshot(self.id, self._db.documents.get(self.path))

    def collection(self, name: str) -> "FakeCollection":
        return FakeCollection(self._db, f"{self.path}/{name}")


class FakeCollection:
    def __init__(self, db: "FakeFirestore", path: str) -> None:
        self._db = db
        self.path = path

    def document(self, doc_id: str) -> FakeDocument:
        return FakeDocument(self._db, f"{self.path}/{doc_id}")

    def add(self, data: dict[str, Any]) -> tuple[datetime, FakeDocument]:
        if self._db.fail_writes:
            raise RuntimeError(f"write failed for {self.path}")
        reference = self.document(f"auto{next(self._db.ids)}")
        self._db.documents[reference.path] = copy.deepcopy(data)
        return datetime.now(tz=timezone.utc), reference


class FakeFirestore:
    """Just enough of ``google.cloud.firestore.Client`` for the repositories."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.failing_reads: set[str] = set()
        self.fail_writes = False
        self.ids = itertools.count(1)

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def add_user(self, email: str, **data: Any) -> None:
        self.documents[f"Users/{email}"] = data

    def add_post(self, post_id: str, **data: Any) -> None:
        self.documents[f"Posts/{post_id}"] = data

    def notifications_for(self, email: str) -> list[dict[str, Any]]:
        prefix = f"Users/{email}/Notifications/"
        return [data for path, data in self.documents.items() if path.startswith(prefix)]


class RecordingSender:
    """Stand-in for ``messaging.send`` that keeps every message."""

    def __init__(self) -> None:
        self.messages: list[Any] = []
        self.error: Exception | None = None

    def __call__(self, message: Any) -> str:
        if self.error is not None:
            raise self.error
        self.messages.append(message)
        return f"projects/forager/messages/{len(self.messages)}"


def push_enabled_user(**overrides: Any) -> dict[str, Any]:
    prefs = {"fcmToken": "device-token-1234567890-abcdef", "enabled": True, "socialNotifications": True}
    prefs.update(overrides)
    return {"notificationPreferences": prefs}


@pytest.fixture()
def firestore() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture()
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture()
def services(firestore: FakeFirestore, sender: RecordingSender) -> NotificationServices:
    return NotificationServices(firestore=firestore, dispatcher=PushDispatcher(sender))


@pytest.fixture()
def push_user():
    """Factory for user documents that are eligible for push."""

    return push_enabled_user
