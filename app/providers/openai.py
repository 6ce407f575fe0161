"""OpenAI chat-completion and image-generation pass-through client."""

import logging
from typing import Any, Optional

import httpx

from app.providers.base import bearer_headers

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Thin forwarder to the OpenAI REST API using a caller-supplied key."""

    key_header = "x-openai-key"

    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: str = ""):
        self._client = client
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    def resolve_key(self, header_key: Optional[str]) -> str:
        return header_key or self.api_key

    async def open_chat_stream(
        self,
        api_key: str,
        model: Any,
        messages: Any,
        stream: Any,
    ) -> httpx.Response:
        """Send a chat completion request and return the response unread.

        The caller owns the response and must close it (aclose) once the body
        has been relayed.
        """
        logger.info("Forwarding chat completion (model=%s, stream=%s)", model, stream)
        request = self._client.build_request(
            "POST",
            f"{self.base_url}/chat/completions",
            json={"model": model, "messages": messages, "stream": stream},
            headers=bearer_headers(api_key),
        )
        return await self._client.send(request, stream=True)

    async def generate_image(
        self,
        api_key: str,
        model: Any,
        prompt: Any,
        size: Any,
    ) -> Any:
        """Request an image and return the decoded JSON response."""
        logger.info("Forwarding image generation (model=%s, size=%s)", model, size)
        response = await self._client.post(
            f"{self.base_url}/images/generations",
            json={"model": model, "prompt": prompt, "size": size},
            headers=bearer_headers(api_key),
        )
        return response.json()


def first_image_url(payload: Any) -> Optional[str]:
    """Pull `data[0].url` out of an images response, tolerating any shape."""
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    return first.get("url") or None
