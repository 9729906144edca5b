"""Stack ranking logic for taskrank.

Builds a fresh priority queue from the open tasks and reads it back in
descending urgency order. The queue is rebuilt every time rather than kept
alive, since scores drift as the clock advances.
"""

from datetime import datetime
from typing import Iterable, Iterator, List, Optional
from taskrank.models.task import Task, TaskStatus
from taskrank.models.time_utils import resolve_now
from taskrank.engine.priority_queue import TaskPriorityQueue


def build_queue(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskPriorityQueue:
    """Enqueue every non-completed task into a new queue.

    Args:
        tasks: Tasks to consider, in creation order
        now: Reference time for scoring (defaults to current UTC time)

    Returns:
        Populated TaskPriorityQueue
    """
    queue = TaskPriorityQueue(now=resolve_now(now))
    for task in tasks:
        if task.status != TaskStatus.COMPLETED:
            queue.enqueue(task)
    return queue


def stack_rank(tasks: Iterable[Task], now: Optional[datetime] = None) -> List[Task]:
    """Stack-rank open tasks by urgency score.

    Completed tasks are dropped. Ties go to the earlier-created task.
    This function is deterministic - same inputs always produce same outputs.

    Args:
        tasks: Tasks to rank
        now: Reference time for scoring (defaults to current UTC time)

    Returns:
        List of tasks sorted by urgency (highest first)
    """
    return build_queue(tasks, now).snapshot_ordered()


def drain(queue: TaskPriorityQueue) -> Iterator[Task]:
    """Yield tasks by repeated dequeue until the queue is empty."""
    while True:
        task = queue.dequeue()
        if task is None:
            return
        yield task
