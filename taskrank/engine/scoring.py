"""Urgency scoring for taskrank.

The score combines the priority tier with deadline proximity:

    score = weight(priority) * 10 + 10 / max(1, days until due)

The tier term dominates, so across tiers a higher priority always ranks
first, and within a tier the nearer deadline wins. Overdue tasks are clamped
to one day out, so their boost is a fixed +10.
"""

from datetime import datetime
from typing import Optional
from taskrank.models.task import Task, TaskStatus
from taskrank.models.time_utils import resolve_now
from taskrank.models.constants import (
    PRIORITY_WEIGHTS,
    TIER_MULTIPLIER,
    URGENCY_NUMERATOR,
    MIN_DAYS_TO_DUE,
    SECONDS_PER_DAY,
)


def days_to_due(task: Task, now: Optional[datetime] = None) -> float:
    """Days from `now` until the task is due, floored at one day.

    Args:
        task: Task to measure
        now: Reference time (defaults to current UTC time)

    Returns:
        Fractional days, never below MIN_DAYS_TO_DUE
    """
    remaining = (task.due_date - resolve_now(now)).total_seconds() / SECONDS_PER_DAY
    return max(MIN_DAYS_TO_DUE, remaining)


def priority_score(task: Task, now: Optional[datetime] = None) -> float:
    """Compute the urgency score of a task at a point in time.

    This function is deterministic - same (task, now) always gives the same score.

    Args:
        task: Task to score
        now: Reference time (defaults to current UTC time)

    Returns:
        Score; higher means more urgent
    """
    weight = PRIORITY_WEIGHTS[task.priority]
    return weight * TIER_MULTIPLIER + URGENCY_NUMERATOR / days_to_due(task, now)


def is_overdue(task: Task, now: Optional[datetime] = None) -> bool:
    """A task is overdue when it is not completed and its due date has passed."""
    if task.status == TaskStatus.COMPLETED:
        return False
    return task.due_date < resolve_now(now)
