"""Shared fixtures and test doubles."""

import asyncio
import random
from datetime import datetime, timezone
from typing import Optional

import pytest

from alertdesk.factory import default_config
from alertdesk.models import Alert
from alertdesk.storage import MemoryStorage
from alertdesk.store import AlertStore


class FailingStorage(MemoryStorage):
    """Memory storage whose reads and/or writes can be made to fail."""

    def __init__(self, fail_get: bool = False, fail_set: bool = False, initial=None):
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_calls = 0

    async def get(self, key: str) -> Optional[str]:
        if self.fail_get:
            raise OSError("storage unavailable")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise OSError("disk full")
        await super().set(key, value)


class SlowStorage(MemoryStorage):
    """Memory storage whose writes take a random, short amount of time."""

    def __init__(self, max_delay: float = 0.01, initial=None):
        super().__init__(initial)
        self.max_delay = max_delay
        self.completed_writes = 0

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(random.uniform(0, self.max_delay))
        await super().set(key, value)
        self.completed_writes += 1


class FixedClock:
    """A clock that always reports the same instant."""

    def __init__(self, instant: Optional[datetime] = None):
        self.instant = instant or datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.instant


def make_alert(alert_id: str, name: str, alert_type: str = "news", **fields) -> Alert:
    timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    data = {
        "id": alert_id,
        "name": name,
        "type": alert_type,
        "is_active": True,
        "created_at": timestamp,
        "updated_at": timestamp,
        "config": default_config(alert_type),
    }
    data.update(fields)
    return Alert(**data)


def two_alert_seed() -> list[Alert]:
    return [
        make_alert("alert-a", "OPEC News", "news"),
        make_alert("alert-b", "Gas Daily", "report"),
    ]


@pytest.fixture
def storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def store(storage: FailingStorage) -> AlertStore:
    """An unloaded store over in-memory storage with the real seed data."""
    return AlertStore(storage)


@pytest.fixture
def small_store(storage: FailingStorage) -> AlertStore:
    """An unloaded store seeded with two alerts."""
    return AlertStore(storage, seed=two_alert_seed)
