"""Pika image-to-video provider."""

from typing import Any, Dict

from app.jobs.models import TaskProvider
from app.providers.base import VideoProvider


class PikaProvider(VideoProvider):
    name = TaskProvider.PIKA
    key_header = "x-pika-key"

    def build_payload(self, prompt: Any, image_url: Any) -> Dict[str, Any]:
        return {"prompt": prompt, "image_url": image_url, "duration": self.duration}
