"""Error types raised by the taskrank engine."""


class TaskRankError(Exception):
    """Base class for taskrank errors."""


class TaskValidationError(TaskRankError, ValueError):
    """A draft or update was rejected before any state changed."""


class TaskNotFoundError(TaskRankError, LookupError):
    """No task with the given id exists."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
