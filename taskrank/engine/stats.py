"""Aggregate task counts for the dashboard."""

from datetime import datetime
from typing import Iterable, Optional
from taskrank.models.task import Task, TaskStats, TaskStatus
from taskrank.models.time_utils import resolve_now
from taskrank.engine.scoring import is_overdue


def task_stats(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskStats:
    """Count tasks by status, plus how many are overdue at `now`.

    total always equals completed + pending + in_progress.
    """
    now = resolve_now(now)
    stats = TaskStats()
    for task in tasks:
        stats.total += 1
        if task.status == TaskStatus.COMPLETED:
            stats.completed += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            stats.in_progress += 1
        else:
            stats.pending += 1
        if is_overdue(task, now):
            stats.overdue += 1
    return stats
