"""Ranking engine for taskrank."""

from taskrank.engine.scoring import priority_score, days_to_due, is_overdue
from taskrank.engine.priority_queue import TaskPriorityQueue
from taskrank.engine.ranking import stack_rank, build_queue, drain
from taskrank.engine.stats import task_stats
from taskrank.engine.scheduler import TaskScheduler

__all__ = [
    "priority_score",
    "days_to_due",
    "is_overdue",
    "TaskPriorityQueue",
    "stack_rank",
    "build_queue",
    "drain",
    "task_stats",
    "TaskScheduler",
]
