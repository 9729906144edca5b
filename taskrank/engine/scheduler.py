"""Task scheduler for taskrank.

Owns the authoritative task collection and keeps the ranked view current:
every add, update or delete is applied and followed by a full rebuild of the
priority queue. Reads that depend on time (ranked view, stats) are evaluated
at call time against the supplied or clock "now".

A single lock guards each mutate-and-rebuild cycle and each read, so one
scheduler can be shared by several threads when used directly as a library.
The async API routes all run on the event loop thread.
"""

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from taskrank.exceptions import TaskNotFoundError, TaskValidationError
from taskrank.models.task import Task, TaskCreate, TaskStats, TaskStatus, TaskUpdate
from taskrank.models.constants import NEXT_STATUS
from taskrank.models.task_factory import create_task, unique_ids
from taskrank.models.time_utils import ensure_utc, utcnow
from taskrank.engine.ranking import stack_rank
from taskrank.engine.stats import task_stats

logger = logging.getLogger(__name__)


class TaskScheduler:
    """In-memory task collection with an urgency-ranked view."""

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        """Create an empty scheduler.

        Args:
            clock: Source of the current time; injectable for tests
        """
        self._clock = clock
        self._tasks: Dict[str, Task] = {}
        self._scheduled: List[Task] = []
        self._lock = threading.Lock()

    def _now(self, now: Optional[datetime] = None) -> datetime:
        return ensure_utc(now if now is not None else self._clock())

    def current_time(self) -> datetime:
        """Current time according to the scheduler clock."""
        return self._now()

    def _rebuild(self, now: Optional[datetime] = None) -> List[Task]:
        """Discard the ranked view and rebuild it from the collection. Caller holds the lock."""
        self._scheduled = stack_rank(self._tasks.values(), self._now(now))
        logger.debug(f"Rebuilt ranked view: {len(self._scheduled)} open of {len(self._tasks)} tasks")
        return self._scheduled

    def _get(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return task

    def _patch(self, task_id: str, changes: Dict[str, Any]) -> Task:
        """Merge changes over an existing task and rebuild. Caller holds the lock."""
        existing = self._get(task_id)
        if changes.get("dependencies") is not None:
            changes["dependencies"] = unique_ids(changes["dependencies"])

        try:
            updated = Task.model_validate({**existing.model_dump(), **changes})
        except ValidationError as e:
            logger.warning(f"Rejected update for task {task_id}: {e.error_count()} validation error(s)")
            raise TaskValidationError(str(e)) from e

        self._tasks[task_id] = updated
        self._rebuild()
        logger.debug(f"Updated task {task_id}: {sorted(changes)}")
        return updated

    def add_task(self, draft: Union[TaskCreate, Mapping[str, Any]]) -> Task:
        """Validate a draft, create the task and rebuild the ranked view.

        Raises:
            TaskValidationError: If the title is blank or the due date is missing;
                nothing is stored in that case
        """
        if not isinstance(draft, TaskCreate):
            try:
                draft = TaskCreate.model_validate(draft)
            except ValidationError as e:
                logger.warning(f"Rejected new task: {e.error_count()} validation error(s)")
                raise TaskValidationError(str(e)) from e

        with self._lock:
            task = create_task(draft, now=self._now())
            self._tasks[task.id] = task
            self._rebuild()
        logger.debug(f"Created task {task.id}: {task.title[:50]}")
        return task

    def update_task(self, task_id: str, updates: Union[TaskUpdate, Mapping[str, Any]]) -> Task:
        """Apply a partial update; fields not provided keep their values.

        Raises:
            TaskNotFoundError: If no task has this id
            TaskValidationError: If the patch is invalid; the task is left unchanged
        """
        if not isinstance(updates, TaskUpdate):
            try:
                updates = TaskUpdate.model_validate(updates)
            except ValidationError as e:
                logger.warning(f"Rejected update for task {task_id}: {e.error_count()} validation error(s)")
                raise TaskValidationError(str(e)) from e

        with self._lock:
            return self._patch(task_id, updates.changes())

    def advance_status(self, task_id: str) -> Task:
        """Move a task one step: pending -> in-progress -> completed -> pending."""
        with self._lock:
            current = self._get(task_id).status
            return self._patch(task_id, {"status": NEXT_STATUS[current]})

    def delete_task(self, task_id: str) -> Task:
        """Remove a task and rebuild the ranked view.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        with self._lock:
            task = self._get(task_id)
            del self._tasks[task_id]
            self._rebuild()
        logger.debug(f"Deleted task {task_id}")
        return task

    def get_task(self, task_id: str) -> Task:
        with self._lock:
            return self._get(task_id)

    def all_tasks(self) -> List[Task]:
        """All tasks in creation order."""
        with self._lock:
            return list(self._tasks.values())

    def ranked_view(self, now: Optional[datetime] = None) -> List[Task]:
        """Non-completed tasks by descending urgency, recomputed at `now`."""
        with self._lock:
            return list(self._rebuild(now))

    def completed_view(self) -> List[Task]:
        """Completed tasks in creation order."""
        with self._lock:
            return [t for t in self._tasks.values() if t.status == TaskStatus.COMPLETED]

    def stats(self, now: Optional[datetime] = None) -> TaskStats:
        with self._lock:
            return task_stats(self._tasks.values(), self._now(now))

    @property
    def scheduled_tasks(self) -> List[Task]:
        """Ranked view as of the most recent rebuild."""
        with self._lock:
            return list(self._scheduled)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
