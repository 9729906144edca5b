"""Tests for task creation and the task models."""

import pytest
from datetime import datetime, timedelta, timezone
from pydantic import ValidationError

from taskrank.models.task import Task, TaskCreate, TaskUpdate, TaskPriority, TaskStatus
from taskrank.models.task_factory import create_task, create_task_defaults, unique_ids


class TestTaskCreationDefaults:
    """Test that task creation uses correct default values."""

    def test_default_task_values(self, now):
        """A minimal draft is filled from defaults."""
        task = create_task(TaskCreate(title="Minimal", due_date=now + timedelta(days=1)), now=now)

        assert task.priority == TaskPriority.MEDIUM
        assert task.status == TaskStatus.PENDING
        assert task.estimated_time == 60
        assert task.description is None
        assert task.dependencies == []
        assert task.created_at == now

    def test_defaults_dict(self):
        defaults = create_task_defaults()

        assert defaults["priority"] == TaskPriority.MEDIUM
        assert defaults["status"] == TaskStatus.PENDING
        assert defaults["estimated_time"] == 60

    def test_provided_fields_override_defaults(self, now):
        draft = TaskCreate(
            title="Custom",
            description="Notes",
            priority=TaskPriority.HIGH,
            due_date=now + timedelta(days=1),
            status=TaskStatus.IN_PROGRESS,
            estimated_time=15,
        )
        task = create_task(draft, now=now)

        assert task.priority == TaskPriority.HIGH
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.estimated_time == 15
        assert task.description == "Notes"

    def test_each_task_gets_new_id(self, now):
        draft = TaskCreate(title="Same", due_date=now)
        assert create_task(draft, now=now).id != create_task(draft, now=now).id

    def test_dependencies_deduplicated_in_order(self, now):
        draft = TaskCreate(title="Deps", due_date=now, dependencies=["b", "a", "b", "c", "a"])
        assert create_task(draft, now=now).dependencies == ["b", "a", "c"]

    def test_unique_ids_empty(self):
        assert unique_ids([]) == []


class TestTaskValidation:
    """Field validation on the task models."""

    def test_title_is_stripped(self, sample_task_base):
        task = Task(**{**sample_task_base, "title": "  Padded  "})
        assert task.title == "Padded"

    def test_blank_title_rejected(self, sample_task_base):
        with pytest.raises(ValidationError):
            Task(**{**sample_task_base, "title": "   "})

    def test_estimated_time_must_be_positive(self, sample_task_base):
        with pytest.raises(ValidationError):
            Task(**{**sample_task_base, "estimated_time": 0})

    def test_invalid_status_rejected(self, sample_task_base):
        with pytest.raises(ValidationError):
            Task(**{**sample_task_base, "status": "done"})

    def test_status_values(self):
        assert [s.value for s in TaskStatus] == ["pending", "in-progress", "completed"]

    def test_naive_due_date_becomes_utc(self, sample_task_base):
        task = Task(**{**sample_task_base, "due_date": datetime(2026, 3, 1, 9, 0)})
        assert task.due_date == datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def test_aware_due_date_converted_to_utc(self, sample_task_base):
        plus_two = timezone(timedelta(hours=2))
        task = Task(**{**sample_task_base, "due_date": datetime(2026, 3, 1, 11, 0, tzinfo=plus_two)})
        assert task.due_date.utcoffset() == timedelta(0)
        assert task.due_date.hour == 9

    def test_draft_requires_due_date(self):
        with pytest.raises(ValidationError):
            TaskCreate(title="No due date")

    def test_draft_rejects_unknown_fields(self, now):
        with pytest.raises(ValidationError):
            TaskCreate(title="x", due_date=now, id="forced")


class TestTaskUpdate:
    """Partial update model."""

    def test_changes_only_include_set_fields(self):
        update = TaskUpdate(status=TaskStatus.COMPLETED)
        assert update.changes() == {"status": TaskStatus.COMPLETED}

    def test_explicit_none_is_kept(self):
        update = TaskUpdate(description=None)
        assert update.changes() == {"description": None}

    def test_immutable_fields_rejected(self, now):
        with pytest.raises(ValidationError):
            TaskUpdate(created_at=now)
        with pytest.raises(ValidationError):
            TaskUpdate(id="abc")
