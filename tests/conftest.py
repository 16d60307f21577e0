"""Shared fixtures for momentum tests."""

from datetime import datetime, timedelta

import pytest

from momentum.storage import MemoryStorage
from momentum.store import ContextStore, SocialEventStore, TaskStore


class FakeClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 9, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


class FlakyStorage(MemoryStorage):
    """MemoryStorage that can be told to fail reads or writes."""

    def __init__(self):
        super().__init__()
        self.fail_reads = False
        self.fail_writes = False
        self.failure = ConnectionError
        self.saves = 0

    async def load_collection(self, key):
        if self.fail_reads:
            raise self.failure("storage offline")
        return await super().load_collection(key)

    async def save_collection(self, key, items):
        if self.fail_writes:
            raise self.failure("storage offline")
        self.saves += 1
        await super().save_collection(key, items)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return FlakyStorage()


@pytest.fixture
def task_store(storage, clock):
    return TaskStore(storage, clock=clock)


@pytest.fixture
def context_store(storage, clock):
    return ContextStore(storage, clock=clock)


@pytest.fixture
def event_store(storage, clock):
    return SocialEventStore(storage, clock=clock)
