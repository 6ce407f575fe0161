"""Task polling endpoint."""

from fastapi import APIRouter, Depends

from app.api.deps import get_registry
from app.jobs.registry import TaskRegistry

router = APIRouter()


@router.get("/task/{task_id}")
async def get_task_status(task_id: str, registry: TaskRegistry = Depends(get_registry)):
    """Get the current state of a video task.

    Unknown ids are not an error: the response is `{"status": "not_found"}`.
    """
    task = registry.get(task_id)
    if task is None:
        return {"status": "not_found"}
    return task.to_public()
