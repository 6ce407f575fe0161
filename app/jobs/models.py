"""Task record data model for video-generation polling."""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel
import uuid


class TaskStatus(str, Enum):
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"


class TaskProvider(str, Enum):
    RUNWAY = "runway"
    PIKA = "pika"
    MOCK = "mock"


class TaskOutput(BaseModel):
    url: str


class TaskRecord(BaseModel):
    """Tracks the lifecycle of one submitted video-generation job."""
    id: str
    status: TaskStatus = TaskStatus.PROCESSING
    provider: TaskProvider
    created: int  # epoch milliseconds
    output: Optional[List[TaskOutput]] = None
    error: Optional[str] = None

    def to_public(self) -> Dict[str, Any]:
        """JSON shape returned by the polling endpoint (unset fields omitted)."""
        return self.model_dump(mode="json", exclude_none=True)


def new_task_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"
