"""Aggregate all API routers."""

from fastapi import APIRouter
from app.api.root import router as root_router
from app.api.openai_relay import router as openai_router
from app.api.video import router as video_router
from app.api.tasks import router as tasks_router

api_router = APIRouter()
api_router.include_router(root_router, tags=["root"])
api_router.include_router(openai_router, tags=["openai"])
api_router.include_router(video_router, prefix="/api", tags=["video"])
api_router.include_router(tasks_router, prefix="/api", tags=["tasks"])
