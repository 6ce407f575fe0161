"""Base interface for upstream providers that accept image-to-video jobs."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from app.jobs.models import TaskProvider

logger = logging.getLogger(__name__)


def bearer_headers(api_key: str) -> Dict[str, str]:
    return {"Content-Type": "application/json", "Authorization": f"Bearer {api_key}"}


class VideoProvider(ABC):
    """Abstract base class for image-to-video providers.

    To add a provider:
    1. Subclass VideoProvider in app/providers/
    2. Set `name` and `key_header` (request header carrying the caller's key),
       implement build_payload()
    3. Register it in app.providers.build_video_providers()
    """

    name: TaskProvider
    key_header: str

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str,
        api_key: str = "",
        duration: int = 5,
    ):
        self._client = client
        self.api_url = api_url
        self.api_key = api_key
        self.duration = duration

    def resolve_key(self, header_key: Optional[str]) -> str:
        """Request header wins over the process-wide configured key."""
        return header_key or self.api_key

    @abstractmethod
    def build_payload(self, prompt: Any, image_url: Any) -> Dict[str, Any]:
        """Return the JSON body for the provider's submit endpoint."""
        ...

    async def submit(self, api_key: str, prompt: Any, image_url: Any) -> Any:
        """POST the job and return the decoded JSON response.

        The upstream status code is not checked; whatever JSON comes back is
        handed to the caller. Network and decode errors propagate.
        """
        logger.info("Submitting video job to %s", self.name.value)
        response = await self._client.post(
            self.api_url,
            json=self.build_payload(prompt, image_url),
            headers=bearer_headers(api_key),
        )
        return response.json()
