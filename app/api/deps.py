"""Request-scoped accessors for the services owned by the application.

`create_app()` stores each service on `app.state`; routers pull them in with
`Depends` so every app instance (and every test) gets its own registry.
"""

import json
from typing import Any, Dict

from fastapi import Request

from app.config import Settings
from app.jobs.registry import TaskRegistry
from app.providers.openai import OpenAIClient
from app.services.video_submission import VideoSubmissionService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> TaskRegistry:
    return request.app.state.registry


def get_openai(request: Request) -> OpenAIClient:
    return request.app.state.openai


def get_video_service(request: Request) -> VideoSubmissionService:
    return request.app.state.video_service


async def json_object(request: Request) -> Dict[str, Any]:
    """Request body as a JSON object.

    A missing, malformed or non-object body reads as `{}` so the relay
    endpoints fall back to their defaults instead of rejecting the call.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
