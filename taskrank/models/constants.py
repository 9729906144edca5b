"""Constants for taskrank.

This module centralizes all magic numbers and default values used throughout the application.
"""

from taskrank.models.task import TaskPriority, TaskStatus


# Priority scoring
PRIORITY_WEIGHTS = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}
TIER_MULTIPLIER = 10.0  # weight * 10 is the tier baseline
URGENCY_NUMERATOR = 10.0
MIN_DAYS_TO_DUE = 1.0  # Overdue and same-day tasks are floored here
SECONDS_PER_DAY = 24 * 60 * 60

# Task defaults
DEFAULT_PRIORITY = TaskPriority.MEDIUM
DEFAULT_STATUS = TaskStatus.PENDING
DEFAULT_ESTIMATED_TIME_MIN = 60

# Status cycle used when advancing a task one step
NEXT_STATUS = {
    TaskStatus.PENDING: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.COMPLETED,
    TaskStatus.COMPLETED: TaskStatus.PENDING,
}
