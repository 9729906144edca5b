"""Data models for taskrank."""

from taskrank.models.task import Task, TaskCreate, TaskUpdate, TaskStats, TaskPriority, TaskStatus

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "TaskStats",
    "TaskPriority",
    "TaskStatus",
]
