"""Image-to-video submission with a guaranteed-success fallback policy.

Submission never fails at the HTTP layer. Every call registers exactly one
task:

- unknown provider selector, or no key for the chosen provider
      -> `mock_` task, response provider "mock"
- provider accepted the job
      -> task under the provider's job id (or `<provider>_<uuid>`)
- anything raised while talking to the provider
      -> `mock_` task carrying the error string, response note
         "provider error; mocked"; the error itself is not returned
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from app.jobs.models import TaskProvider
from app.jobs.registry import TaskRegistry
from app.providers.base import VideoProvider

logger = logging.getLogger(__name__)

PROVIDER_ERROR_NOTE = "provider error; mocked"


class ImageToVideoRequest(BaseModel):
    # Untyped on purpose: any JSON value is accepted and forwarded as sent
    image_url: Any = None
    prompt: Any = ""
    provider: Any = "runway"


class VideoSubmissionService:
    def __init__(self, registry: TaskRegistry, providers: Mapping[str, VideoProvider]):
        self._registry = registry
        self._providers = providers

    def _select(self, selector: Any) -> Optional[VideoProvider]:
        if not isinstance(selector, str):
            return None
        return self._providers.get(selector)

    async def submit(
        self,
        request: ImageToVideoRequest,
        headers: Mapping[str, str],
    ) -> Dict[str, Any]:
        """Submit a job. Provider keys are looked up in `headers` by each
        provider's `key_header`, then in configuration."""
        provider = self._select(request.provider)
        if provider is None:
            return self._mock()

        try:
            api_key = provider.resolve_key(headers.get(provider.key_header))
            if not api_key:
                logger.info("No %s key available, mocking task", provider.name.value)
                return self._mock()

            raw = await provider.submit(api_key, request.prompt, request.image_url)
            job_id = raw.get("id") if isinstance(raw, dict) else None
            task = self._registry.create(
                provider.name,
                task_id=str(job_id) if job_id else None,
            )
            return {
                "ok": True,
                "task_id": task.id,
                "provider": provider.name.value,
                "raw": raw,
            }
        except Exception as e:
            logger.warning(
                "%s submission failed, mocking task: %s: %s",
                provider.name.value,
                type(e).__name__,
                e,
            )
            task = self._registry.create(TaskProvider.MOCK, error=str(e))
            return {
                "ok": True,
                "task_id": task.id,
                "provider": TaskProvider.MOCK.value,
                "note": PROVIDER_ERROR_NOTE,
            }

    def _mock(self) -> Dict[str, Any]:
        task = self._registry.create(TaskProvider.MOCK)
        return {"ok": True, "task_id": task.id, "provider": TaskProvider.MOCK.value}
