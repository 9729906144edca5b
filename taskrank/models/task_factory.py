"""Task creation factory for taskrank.

This module centralizes task creation logic so every task gets its id,
creation timestamp and default values the same way.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from taskrank.models.task import Task, TaskCreate
from taskrank.models.time_utils import resolve_now
from taskrank.models.constants import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    DEFAULT_ESTIMATED_TIME_MIN,
)


def unique_ids(task_ids: Iterable[str]) -> List[str]:
    """Deduplicate while preserving order."""
    seen = set()
    unique: List[str] = []
    for task_id in task_ids:
        if task_id not in seen:
            seen.add(task_id)
            unique.append(task_id)
    return unique


def create_task_defaults() -> Dict[str, Any]:
    """Get default task values as a dictionary.

    Returns:
        Dictionary with default task field values using constants
    """
    return {
        "description": None,
        "priority": DEFAULT_PRIORITY,
        "status": DEFAULT_STATUS,
        "estimated_time": DEFAULT_ESTIMATED_TIME_MIN,
        "dependencies": [],
    }


def create_task(draft: TaskCreate, now: Optional[datetime] = None) -> Task:
    """Create a task from a validated draft, applying defaults.

    The id (UUID v4) and created_at are assigned here and nowhere else.

    Args:
        draft: Validated task draft
        now: Creation time (defaults to current UTC time)

    Returns:
        Task object with defaults applied
    """
    defaults = create_task_defaults()
    provided = {k: v for k, v in draft.model_dump().items() if v is not None}
    fields = {**defaults, **provided}
    fields["dependencies"] = unique_ids(fields["dependencies"])

    return Task(
        id=str(uuid.uuid4()),
        created_at=resolve_now(now),
        **fields,
    )
