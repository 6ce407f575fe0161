"""Service banner endpoint."""

from fastapi import APIRouter, Depends

from app.api.deps import get_settings
from app.config import Settings

router = APIRouter()


@router.get("/")
async def root(settings: Settings = Depends(get_settings)):
    return {"ok": True, "service": settings.service_name}
