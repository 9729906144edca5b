"""Binary max-heap of tasks ordered by urgency score.

The heap is a dense zero-indexed list: the children of node i live at
2i+1 and 2i+2, and its parent at (i-1)//2. Scores are recomputed from the
live task on every comparison and never stored in the heap, because they
depend on the current time.

Equal scores are broken by earlier created_at, then by earlier enqueue order,
so the ordering is total and deterministic.
"""

import itertools
from datetime import datetime
from typing import Callable, List, NamedTuple, Optional

from taskrank.models.task import Task
from taskrank.models.time_utils import ensure_utc, utcnow
from taskrank.engine.scoring import priority_score


class _HeapEntry(NamedTuple):
    task: Task
    seq: int


class TaskPriorityQueue:
    """Max-heap over tasks keyed by priority_score(task, now)."""

    def __init__(
        self,
        now: Optional[datetime] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        """Create an empty queue.

        Args:
            now: Fixed reference time for every comparison. When None, the
                clock is read at each comparison instead.
            clock: Source of the current time when `now` is not fixed
        """
        self._heap: List[_HeapEntry] = []
        self._now = ensure_utc(now) if now is not None else None
        self._clock = clock
        self._seq = itertools.count()

    def _current_now(self) -> datetime:
        if self._now is not None:
            return self._now
        return ensure_utc(self._clock())

    def _outranks(self, a: _HeapEntry, b: _HeapEntry) -> bool:
        """True if entry a should sit above entry b."""
        now = self._current_now()
        score_a = priority_score(a.task, now)
        score_b = priority_score(b.task, now)
        if score_a != score_b:
            return score_a > score_b
        return (a.task.created_at, a.seq) < (b.task.created_at, b.seq)

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._outranks(self._heap[index], self._heap[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = 2 * index + 2
            largest = index

            if left < size and self._outranks(self._heap[left], self._heap[largest]):
                largest = left
            if right < size and self._outranks(self._heap[right], self._heap[largest]):
                largest = right

            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def enqueue(self, task: Task) -> None:
        """Insert a task. O(log n)."""
        self._heap.append(_HeapEntry(task, next(self._seq)))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Optional[Task]:
        """Remove and return the most urgent task.

        Returns:
            The top task, or None when the queue is empty. An empty queue is
            a normal state, so repeated calls keep returning None.
        """
        if not self._heap:
            return None

        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return root.task

    def snapshot_ordered(self) -> List[Task]:
        """All queued tasks by descending score, without mutating the heap."""
        now = self._current_now()
        ordered = sorted(
            self._heap,
            key=lambda entry: (-priority_score(entry.task, now), entry.task.created_at, entry.seq),
        )
        return [entry.task for entry in ordered]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
