# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from task_api.main import create_app
from task_api.services import TaskService
from task_api.storage import TaskStore


class TickingClock:
    """
    Deterministic clock for unit tests.

    Every call returns a time one second later than the previous one,
    so "updated_at changed" assertions never depend on timer resolution.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def service(store: TaskStore, clock: TickingClock) -> TaskService:
    return TaskService(store, clock=clock)


@pytest.fixture()
def client(service: TaskService) -> TestClient:
    return TestClient(create_app(service))
