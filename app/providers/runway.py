"""Runway image-to-video provider."""

from typing import Any, Dict

from app.jobs.models import TaskProvider
from app.providers.base import VideoProvider


class RunwayProvider(VideoProvider):
    name = TaskProvider.RUNWAY
    key_header = "x-runway-key"

    def build_payload(self, prompt: Any, image_url: Any) -> Dict[str, Any]:
        return {"prompt": prompt, "init_image": image_url, "duration": self.duration}
