"""Completion policies decide when a processing task is reported as done.

The proxy never polls the real provider. A policy is consulted on every
status read and may mutate the task in place.
"""

from abc import ABC, abstractmethod

from app.jobs.models import TaskOutput, TaskRecord, TaskStatus


class CompletionPolicy(ABC):
    """Strategy interface applied lazily by the task registry."""

    @abstractmethod
    def apply(self, task: TaskRecord, now_ms: int) -> None:
        """Advance `task` if it should be considered finished at `now_ms`."""
        ...


class FixedDelayCompletion(CompletionPolicy):
    """Marks a task succeeded once `delay_ms` has elapsed since creation.

    The output points at a sample clip: `base_url + "/static/sample.mp4"`
    when a base URL is configured, otherwise `fallback_url`.
    """

    SAMPLE_PATH = "/static/sample.mp4"

    def __init__(self, delay_ms: int = 3000, base_url: str = "", fallback_url: str = ""):
        self.delay_ms = delay_ms
        self.base_url = base_url
        self.fallback_url = fallback_url

    def output_url(self) -> str:
        if self.base_url:
            return self.base_url + self.SAMPLE_PATH
        return self.fallback_url

    def apply(self, task: TaskRecord, now_ms: int) -> None:
        # Re-applied on every read past the threshold; the result is identical.
        if now_ms - task.created > self.delay_ms:
            task.status = TaskStatus.SUCCEEDED
            task.output = [TaskOutput(url=self.output_url())]
