"""Task registry interface and in-memory implementation.

Tasks live only for the lifetime of the process. Retention is bounded by a
TTL and a maximum size; evicted tasks read as not found.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Callable, Optional

from app.jobs.completion import CompletionPolicy
from app.jobs.models import TaskProvider, TaskRecord, new_task_id

logger = logging.getLogger(__name__)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class TaskRegistry(ABC):
    """Abstract interface for tracking submitted video jobs."""

    @abstractmethod
    def create(
        self,
        provider: TaskProvider,
        task_id: Optional[str] = None,
        error: Optional[str] = None,
    ) -> TaskRecord:
        """Register a new processing task. Returns the stored record."""
        ...

    @abstractmethod
    def get(self, task_id: str) -> Optional[TaskRecord]:
        """Look up a task, applying the completion policy first."""
        ...


class InMemoryTaskRegistry(TaskRegistry):
    """Dict-backed registry. All operations are synchronous, so a status
    read-modify-write never interleaves with another coroutine."""

    def __init__(
        self,
        completion: CompletionPolicy,
        ttl_seconds: int = 3600,
        max_tasks: int = 10000,
        clock: Callable[[], int] = _epoch_ms,
    ):
        self._tasks: "OrderedDict[str, TaskRecord]" = OrderedDict()
        self._completion = completion
        self._ttl_ms = ttl_seconds * 1000
        self._max_tasks = max_tasks
        self._clock = clock

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: str) -> bool:
        return task_id in self._tasks

    def create(
        self,
        provider: TaskProvider,
        task_id: Optional[str] = None,
        error: Optional[str] = None,
    ) -> TaskRecord:
        self.cleanup_expired()

        task = TaskRecord(
            id=task_id or new_task_id(provider.value),
            provider=provider,
            created=self._clock(),
            error=error,
        )
        # A provider may hand back an id we already hold; the newer task wins
        self._tasks.pop(task.id, None)
        self._tasks[task.id] = task

        # Evict oldest if over capacity
        while self._max_tasks and len(self._tasks) > self._max_tasks:
            oldest_id, _ = self._tasks.popitem(last=False)
            logger.info("Evicting task %s (registry full)", oldest_id)

        return task

    def get(self, task_id: str) -> Optional[TaskRecord]:
        task = self._tasks.get(task_id)
        if task is None:
            return None
        now = self._clock()
        if self._is_expired(task, now):
            del self._tasks[task_id]
            return None
        self._completion.apply(task, now)
        return task

    def cleanup_expired(self) -> int:
        """Remove tasks older than the TTL. Returns count of removed tasks."""
        if not self._ttl_ms:
            return 0
        now = self._clock()
        removed = 0
        # Insertion order is creation order, so stop at the first live task
        while self._tasks:
            oldest_id, oldest = next(iter(self._tasks.items()))
            if not self._is_expired(oldest, now):
                break
            del self._tasks[oldest_id]
            removed += 1
        if removed:
            logger.debug("Removed %d expired task(s)", removed)
        return removed

    def _is_expired(self, task: TaskRecord, now: int) -> bool:
        return bool(self._ttl_ms) and now - task.created > self._ttl_ms
