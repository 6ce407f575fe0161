"""OpenAI relay endpoints: chat completion (streamed) and image generation.

Without a key (header `x-openai-key` or OPENAI_API_KEY) both endpoints answer
with a mock payload instead of calling OpenAI. Upstream failures surface as
HTTP 500 `{"error": "..."}`.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from pydantic import BaseModel, Field
from starlette.background import BackgroundTask

from app.api.deps import get_openai, get_settings, json_object
from app.config import Settings
from app.providers.openai import OpenAIClient, first_image_url

logger = logging.getLogger(__name__)

router = APIRouter()

MOCK_CHAT_TEXT = "⚠️ MOCK: no OpenAI key at backend"


# Fields accept any JSON value; explicit values (null included) are
# forwarded, only absent ones take a default.
class ChatRequest(BaseModel):
    model: Any = None
    messages: Any = Field(default_factory=list)
    stream: Any = True


class ImageRequest(BaseModel):
    model: Any = None
    prompt: Any = ""
    size: Any = "1024x1024"


def _model(request: BaseModel, default: str) -> Any:
    return request.model if "model" in request.model_fields_set else default


@router.post("/openai/chat")
async def chat(
    http_request: Request,
    body: Dict[str, Any] = Depends(json_object),
    openai: OpenAIClient = Depends(get_openai),
    settings: Settings = Depends(get_settings),
):
    """Relay a chat completion and stream the upstream body back as plain text."""
    request = ChatRequest.model_validate(body)
    api_key = openai.resolve_key(http_request.headers.get(openai.key_header))
    if not api_key:
        return PlainTextResponse(MOCK_CHAT_TEXT)

    try:
        upstream = await openai.open_chat_stream(
            api_key,
            model=_model(request, settings.default_chat_model),
            messages=request.messages,
            stream=request.stream,
        )
    except Exception as e:
        logger.exception("Chat relay failed")
        return JSONResponse(status_code=500, content={"error": str(e)})

    # Decoded body (Content-Encoding undone) relayed whatever the upstream
    # status or content type
    return StreamingResponse(
        upstream.aiter_bytes(),
        media_type="text/plain; charset=utf-8",
        background=BackgroundTask(upstream.aclose),
    )


@router.post("/openai/image")
async def image(
    http_request: Request,
    body: Dict[str, Any] = Depends(json_object),
    openai: OpenAIClient = Depends(get_openai),
    settings: Settings = Depends(get_settings),
):
    """Generate an image and return the first result URL plus the raw response."""
    request = ImageRequest.model_validate(body)
    api_key = openai.resolve_key(http_request.headers.get(openai.key_header))
    if not api_key:
        return {"ok": True, "url": None, "mock": True}

    try:
        raw = await openai.generate_image(
            api_key,
            model=_model(request, settings.default_image_model),
            prompt=request.prompt,
            size=request.size,
        )
    except Exception as e:
        logger.exception("Image relay failed")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return {"ok": True, "url": first_image_url(raw), "raw": raw}
