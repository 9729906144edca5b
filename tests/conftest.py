"""Pytest fixtures and configuration for taskrank tests."""

import pytest
import uuid
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from taskrank.engine.scheduler import TaskScheduler
from taskrank.models.task import Task, TaskPriority, TaskStatus


# Fixed reference time so score fixtures are exact
FIXED_NOW = datetime(2026, 1, 26, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Controllable clock for scheduler tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def now():
    """Fixed reference time."""
    return FIXED_NOW


@pytest.fixture
def clock():
    """Frozen clock starting at FIXED_NOW."""
    return FrozenClock(FIXED_NOW)


@pytest.fixture
def sample_task_base(now):
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "description": "Test description",
        "priority": TaskPriority.MEDIUM,
        "due_date": now + timedelta(days=3),
        "status": TaskStatus.PENDING,
        "created_at": now - timedelta(hours=1),
        "estimated_time": 60,
        "dependencies": [],
    }


@pytest.fixture
def make_task(sample_task_base):
    """Factory for tasks with a fresh id and overridden fields."""
    def _make(**overrides) -> Task:
        return Task(**{**sample_task_base, "id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)


@pytest.fixture
def scheduler(clock):
    """Scheduler driven by the frozen clock."""
    return TaskScheduler(clock=clock)


@pytest.fixture
def test_client(scheduler):
    """Create a FastAPI test client with an isolated scheduler."""
    from taskrank.api.app import app, get_scheduler

    app.dependency_overrides[get_scheduler] = lambda: scheduler

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
