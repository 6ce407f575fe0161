"""Upstream provider clients."""

from typing import Dict

import httpx

from app.config import Settings
from app.providers.base import VideoProvider
from app.providers.openai import OpenAIClient
from app.providers.pika import PikaProvider
from app.providers.runway import RunwayProvider


def build_video_providers(settings: Settings, client: httpx.AsyncClient) -> Dict[str, VideoProvider]:
    """Map provider selector string -> configured provider instance."""
    providers = [
        RunwayProvider(
            client,
            settings.runway_api_url,
            settings.runway_api_key,
            duration=settings.video_duration_seconds,
        ),
        PikaProvider(
            client,
            settings.pika_api_url,
            settings.pika_api_key,
            duration=settings.video_duration_seconds,
        ),
    ]
    return {p.name.value: p for p in providers}


def build_openai_client(settings: Settings, client: httpx.AsyncClient) -> OpenAIClient:
    return OpenAIClient(client, settings.openai_base_url, settings.openai_api_key)
