"""Image-to-video submission endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_video_service, json_object
from app.services.video_submission import ImageToVideoRequest, VideoSubmissionService

router = APIRouter()


@router.post("/image-to-video")
async def image_to_video(
    http_request: Request,
    body: Dict[str, Any] = Depends(json_object),
    service: VideoSubmissionService = Depends(get_video_service),
):
    """Submit an image-to-video job.

    Always answers 200 with a task id. Poll GET /api/task/{task_id} for status.
    Keys come from `x-runway-key` / `x-pika-key` or configuration.
    """
    return await service.submit(
        ImageToVideoRequest.model_validate(body),
        headers=http_request.headers,
    )
